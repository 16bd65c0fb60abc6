import re

# Query-string limits
QUERY_MAX_LENGTH = 100
MAX_SEARCH_TERMS = 10
PAGE_MIN = 1
PAGE_MAX = 1000
LIMIT_MIN = 1
LIMIT_MAX = 50
DEFAULT_PAGE = PAGE_MIN
DEFAULT_LIMIT = 20

# Stable error codes returned to clients
VALIDATION_CODES = {
    "QUERY_TOO_LONG": "QUERY_TOO_LONG",
    "QUERY_INVALID_CHARS": "QUERY_INVALID_CHARS",
    "TOO_MANY_TERMS": "TOO_MANY_TERMS",
    "PAGE_OUT_OF_RANGE": "PAGE_OUT_OF_RANGE",
    "LIMIT_OUT_OF_RANGE": "LIMIT_OUT_OF_RANGE",
    "INVALID_NUMBER": "INVALID_NUMBER",
}

# Any match rejects the whole query
SUSPICIOUS_PATTERNS = [
    re.compile(
        r"\b(SELECT|INSERT|UPDATE|DELETE|DROP|CREATE|ALTER|EXEC|UNION)\b",
        re.IGNORECASE,
    ),  # SQL keywords
    re.compile(r"<script[^>]*>", re.IGNORECASE),  # Script tags
    re.compile(r"javascript:", re.IGNORECASE),  # JavaScript URLs
    re.compile(r"data:.*base64", re.IGNORECASE | re.DOTALL),  # Data URLs
    re.compile(r"[<>{}\[\]\\]"),  # Brackets, braces and backslashes
]
