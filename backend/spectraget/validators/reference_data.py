"""Reference data for the constraint checkers — patterns and limits.

Kept in one place so the checkers stay small and the patterns are easy to audit.
"""

import re

# local@domain.tld, no whitespace and a single @ per side. Not RFC 5322.
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

# Symbols that count towards password strength
PASSWORD_SYMBOLS = "@$!%*?&"

# >= 8 chars drawn from letters, digits and PASSWORD_SYMBOLS, with at least
# one of each class
STRONG_PASSWORD_PATTERN = re.compile(
    r"(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.*[@$!%*?&])[A-Za-z0-9@$!%*?&]{8,}"
)

PASSWORD_REQUIREMENTS = "at least 8 characters, including uppercase, lowercase, number, and special character"

# Leading portion accepted by lenient integer parsing
INT_PREFIX_PATTERN = re.compile(r"\s*([+-]?[0-9]+)")

# Leading portion accepted by lenient float parsing
FLOAT_PREFIX_PATTERN = re.compile(
    r"\s*([+-]?(?:Infinity|[0-9]+\.?[0-9]*(?:[eE][+-]?[0-9]+)?|\.[0-9]+(?:[eE][+-]?[0-9]+)?))"
)

# Largest distance from the epoch a timestamp may have, in milliseconds
MAX_TIMESTAMP_MS = 8.64e15

# Textual date layouts tried after ISO-8601
DATE_FORMATS = [
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M:%S",
    "%b %d %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%B %d, %Y",
    "%d %b %Y",
    "%d %B %Y",
    "%a %b %d %Y",
    "%a %b %d %Y %H:%M:%S",
]

# Placeholder text for mapping values coerced to a string
OBJECT_TEXT = "[object Object]"
