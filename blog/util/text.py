"""Title normalization and slug derivation."""

import re
import unicodedata

SLUG_MAX_LENGTH = 100


def _strip_diacritics(value: str) -> str:
    decomposed = unicodedata.normalize("NFKD", value)
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def normalize_title(title: str) -> str:
    """Canonical form of a title used for uniqueness comparison.

    Case, diacritics and whitespace differences collapse to the same value:
    ``"  Héllo   World "`` and ``"hello world"`` both normalize to
    ``"hello world"``.

    Args:
        title: Post title as entered

    Returns:
        Normalized title
    """
    folded = _strip_diacritics(title).casefold()
    return " ".join(folded.split())


def slugify(title: str) -> str:
    """Convert title to URL-safe slug format.

    - Folds diacritics to their ASCII base letter
    - Converts to lowercase
    - Replaces runs of non-alphanumeric chars with a single hyphen
    - Strips leading/trailing hyphens
    - Truncates to 100 characters

    Args:
        title: Title to slugify

    Returns:
        URL-safe slug string (may be empty if title has no valid chars)
    """
    ascii_title = _strip_diacritics(title).encode("ascii", "ignore").decode("ascii")
    slug = re.sub(r"[^a-z0-9]+", "-", ascii_title.lower())
    return slug.strip("-")[:SLUG_MAX_LENGTH].rstrip("-")
