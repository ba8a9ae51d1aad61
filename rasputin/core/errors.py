"""Generation errors, reported to front ends as user messages."""


class GenerationError(ValueError):
    """Base class: the request cannot produce a sequence."""


class InvalidRequest(GenerationError):
    """No character class selected, or an unknown class name."""


class InvalidLength(GenerationError):
    """Length is not an integer or lies outside [MIN_LENGTH, MAX_LENGTH]."""
