"""City name normalizer.

Folds accented city names to plain ASCII-friendly text and encodes them
for a single query-string parameter. The weather provider matches
unaccented names more reliably than accented ones.
"""

import unicodedata
from urllib.parse import quote_plus

_NON_SPACING_MARK = "Mn"


def strip_diacritics(text: str) -> str:
    """Remove combining marks from a string.

    Decomposes to NFD, drops every non-spacing mark and recomposes
    to NFC, so "São Paulo" becomes "Sao Paulo".

    Args:
        text: Any Unicode string

    Returns:
        The string without diacritics
    """
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(
        char for char in decomposed
        if unicodedata.category(char) != _NON_SPACING_MARK
    )
    return unicodedata.normalize("NFC", stripped)


def normalize_city_name(name: str) -> str:
    """Make a city name safe to embed as a query parameter value.

    Total and deterministic: any string is accepted, and the empty
    string maps to the empty string.

    Args:
        name: City name as returned by the postal directory

    Returns:
        Diacritic-free, query-string encoded city name (spaces as "+")
    """
    return quote_plus(strip_diacritics(name))
