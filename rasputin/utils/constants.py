"""Constants for Rasputin."""

import string
from types import MappingProxyType

# Character classes (canonical order)
LOWERCASE = "lowercase"
UPPERCASE = "uppercase"
NUMERIC = "numeric"
SPECIAL = "special"
CLASS_NAMES = (LOWERCASE, UPPERCASE, NUMERIC, SPECIAL)

# Character tables, read-only
CHARACTERS = MappingProxyType({
    LOWERCASE: tuple(string.ascii_lowercase),  # 26
    UPPERCASE: tuple(string.ascii_uppercase),  # 26
    NUMERIC: tuple(string.digits),  # 10
    SPECIAL: tuple(string.punctuation),  # 32
})

# Keyboard shortcuts: first letter of each class
SHORTCUTS = MappingProxyType({
    "l": LOWERCASE,
    "u": UPPERCASE,
    "n": NUMERIC,
    "s": SPECIAL,
})
GENERATE_KEY = "g"

# Sequence length
MIN_LENGTH = 1
MAX_LENGTH = 512
DEFAULT_LENGTH = 8
DEFAULT_CLASSES = (LOWERCASE,)

# Length buttons in the chat settings panel
LENGTH_STEPS = (-8, -1, 1, 8)

# User-facing error messages
MSG_NO_TYPE = "At least one type must be selected!"
MSG_TOO_LONG = "Current maximum character length exceeded!"
MSG_TOO_SHORT = f"Length must be at least {MIN_LENGTH}."
MSG_NOT_A_NUMBER = "Length must be a whole number."

# Compact settings encoding, e.g. "lun:16"
EMPTY_SELECTION = "-"
