"""Data models for Rasputin: character classes, requests and settings."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from enum import Enum

from rasputin.core.errors import InvalidLength, InvalidRequest
from rasputin.utils.constants import (
    CHARACTERS,
    CLASS_NAMES,
    DEFAULT_CLASSES,
    DEFAULT_LENGTH,
    EMPTY_SELECTION,
    MAX_LENGTH,
    MIN_LENGTH,
    MSG_NO_TYPE,
    MSG_NOT_A_NUMBER,
    MSG_TOO_LONG,
    MSG_TOO_SHORT,
    SHORTCUTS,
)


class CharacterClass(str, Enum):
    """A named, fixed set of characters that is enabled as a unit.

    Member order is the canonical pool order.
    """

    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    NUMERIC = "numeric"
    SPECIAL = "special"

    @property
    def chars(self) -> tuple[str, ...]:
        return CHARACTERS[self.value]

    @property
    def shortcut(self) -> str:
        return self.value[0]

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: CharacterClass | str) -> CharacterClass:
        """Resolve a member, a class name ("numeric") or a shortcut ("n")."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            key = SHORTCUTS.get(key, key)
            try:
                return cls(key)
            except ValueError:
                pass
        raise InvalidRequest(f"Unknown character type: {value!r}")


def parse_classes(
    values: Iterable[CharacterClass | str],
) -> frozenset[CharacterClass]:
    """Normalize class names/shortcuts. Empty input is allowed here.

    A bare string is read as user input, so "numeric" and "lun" both work.
    """
    if isinstance(values, str):
        return parse_types(values)
    return frozenset(CharacterClass.parse(v) for v in values)


def parse_shortcuts(letters: str) -> frozenset[CharacterClass]:
    """Parse a run of shortcut letters such as "lun"."""
    return frozenset(CharacterClass.parse(letter) for letter in letters)


def parse_types(text: str) -> frozenset[CharacterClass]:
    """Parse user input such as "lun", "lowercase special" or "l,u"."""
    classes: set[CharacterClass] = set()
    for token in text.replace(",", " ").split():
        key = token.lower()
        if key in CLASS_NAMES:
            classes.add(CharacterClass(key))
        else:
            classes.update(parse_shortcuts(key))
    return frozenset(classes)


def ordered(classes: Iterable[CharacterClass]) -> list[CharacterClass]:
    """Sort classes into canonical order."""
    selected = set(classes)
    return [c for c in CharacterClass if c in selected]


def check_length(value: object) -> int:
    """Validate a sequence length. Raises InvalidLength."""
    # bool is an int subclass; True is not a length
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidLength(MSG_NOT_A_NUMBER)
    if value < MIN_LENGTH:
        raise InvalidLength(MSG_TOO_SHORT)
    if value > MAX_LENGTH:
        raise InvalidLength(MSG_TOO_LONG)
    return value


def parse_length(text: str | int) -> int:
    """Parse user input (e.g. "16") into a valid length."""
    if isinstance(text, str):
        try:
            value: object = int(text.strip())
        except ValueError:
            raise InvalidLength(MSG_NOT_A_NUMBER) from None
    else:
        value = text
    return check_length(value)


@dataclass(frozen=True)
class GenerationRequest:
    """A validated request: non-empty class set, length in range.

    Classes are checked before the length, so an empty selection reports
    InvalidRequest whatever the length is.
    """

    enabled_classes: frozenset[CharacterClass]
    length: int = DEFAULT_LENGTH

    def __post_init__(self) -> None:
        if not self.enabled_classes:
            raise InvalidRequest(MSG_NO_TYPE)
        check_length(self.length)

    @classmethod
    def create(
        cls,
        enabled_classes: Iterable[CharacterClass | str],
        length: int = DEFAULT_LENGTH,
    ) -> GenerationRequest:
        return cls(enabled_classes=parse_classes(enabled_classes), length=length)

    @property
    def classes(self) -> list[CharacterClass]:
        return ordered(self.enabled_classes)


def _default_classes() -> frozenset[CharacterClass]:
    return parse_classes(DEFAULT_CLASSES)


@dataclass(frozen=True)
class Settings:
    """Front-end selection state. May be invalid until to_request().

    Compact encoding examples: "l:8" = lowercase, length 8;
    "lns:32" = lowercase+numeric+special, length 32; "-:8" = nothing selected.
    """

    enabled_classes: frozenset[CharacterClass] = field(
        default_factory=_default_classes
    )
    length: int = DEFAULT_LENGTH

    @classmethod
    def default(cls) -> Settings:
        """Only lowercase selected, default length."""
        return cls()

    @property
    def classes(self) -> list[CharacterClass]:
        return ordered(self.enabled_classes)

    def is_enabled(self, char_class: CharacterClass) -> bool:
        return char_class in self.enabled_classes

    def toggled(self, char_class: CharacterClass | str) -> Settings:
        """Flip one class on or off."""
        target = CharacterClass.parse(char_class)
        return replace(self, enabled_classes=self.enabled_classes ^ {target})

    def with_length(self, length: int) -> Settings:
        return replace(self, length=length)

    def adjusted(self, delta: int) -> Settings:
        """Shift the length by delta, clamped to the allowed range."""
        length = min(MAX_LENGTH, max(MIN_LENGTH, self.length + delta))
        return replace(self, length=length)

    def to_request(self) -> GenerationRequest:
        return GenerationRequest(enabled_classes=self.enabled_classes, length=self.length)

    def compact(self) -> str:
        """Encode to compact string."""
        letters = "".join(c.shortcut for c in self.classes) or EMPTY_SELECTION
        return f"{letters}:{self.length}"

    @classmethod
    def from_compact(cls, code: str) -> Settings:
        """Decode a compact string. Raises ValueError on malformed input."""
        letters, sep, length_str = code.partition(":")
        if not sep or not length_str.isdigit():
            raise ValueError(f"Invalid settings code: {code!r}")
        if letters == EMPTY_SELECTION:
            classes: frozenset[CharacterClass] = frozenset()
        else:
            try:
                classes = parse_shortcuts(letters)
            except InvalidRequest as e:
                raise ValueError(f"Invalid settings code: {code!r}") from e
        return cls(enabled_classes=classes, length=int(length_str))
