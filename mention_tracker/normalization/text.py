import re
import unicodedata
from functools import lru_cache

# Letters canonical decomposition leaves intact (no combining mark to strip)
FOLD_TRANSLATION = str.maketrans(
    {
        "ø": "o",
        "đ": "d",
        "ł": "l",
        "ħ": "h",
        "ı": "i",
        "ß": "ss",
        "æ": "ae",
        "œ": "oe",
        "þ": "th",
        "ð": "d",
    }
)


def normalize_text(text: str) -> str:
    """Canonicalizes a string for comparison.

    Lower-cases, decomposes accented characters and drops the combining
    marks, folds the remaining non-decomposable letters to ASCII and trims
    surrounding whitespace. "Ødegaard" and "odegaard" both come out as
    "odegaard".
    """
    decomposed = unicodedata.normalize("NFD", text.lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.translate(FOLD_TRANSLATION).strip()


# Terms come from the roster, so the cache stays bounded by its size
@lru_cache(maxsize=None)
def whole_word_pattern(term: str) -> re.Pattern:
    """Case-insensitive pattern matching `term` only as a whole word.

    A boundary is any non-alphanumeric character or either end of the text,
    so "Ham" does not match inside "Hamilton" but does match "Ham's".
    """
    return re.compile(
        rf"(?<![^\W_]){re.escape(term)}(?![^\W_])", re.IGNORECASE
    )


def contains_whole_word(text: str, term: str) -> bool:
    return whole_word_pattern(term).search(text) is not None
