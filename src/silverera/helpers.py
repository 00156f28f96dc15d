import re
from typing import Any

# Backtick plus the JavaScript \s set (Unicode space separators, line
# terminators, BOM). Python's \s differs: it also matches \x1c-\x1f and \x85
# and does not match U+FEFF.
_URL_JUNK = re.compile(
    "[`\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"
)


def safe_str(v: Any) -> str:
    """Best-effort stringify without turning missing values into the literal 'None'."""
    if v is None:
        return ""
    return str(v)


def clean_image_url(v: Any) -> str:
    """
    Remove every backtick and whitespace character from a provider image URL.

    Providers occasionally wrap the URL in markdown code ticks or break it
    across lines. Characters are removed wherever they occur, not only at the
    ends; everything else keeps its original order.
    """
    return _URL_JUNK.sub("", safe_str(v))
