"""
Keyword normalization for case, accent and punctuation insensitive matching.
"""

import re

from unidecode import unidecode

# Characters that often appear inside words (e.g. "P.O.W.E.R", "T*i*t*l*e")
SKIP_CHARS = "-*.:'"

_SKIP_CHARS_TABLE = str.maketrans("", "", SKIP_CHARS)
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_keyword(value: str) -> str:
    """Map text to its canonical form for substring comparison.

    Transliterates to ASCII, lower-cases, spells out "$" and "&", removes
    in-word punctuation and collapses whitespace.

    Examples:
        >>> normalize_keyword("Gün-ther &  $imon")
        'gunther and simon'
        >>> normalize_keyword("P.O.W.E.R")
        'power'
    """
    value = unidecode(value).lower().replace("$", "s").replace("&", "and")
    value = value.translate(_SKIP_CHARS_TABLE)
    return _WHITESPACE_RE.sub(" ", value).strip()
