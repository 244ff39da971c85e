"""Identifier Normalizer - turns free-text labels into primary-key slugs.

Invariants:
    - Output contains only [a-z0-9]
    - Separators and punctuation are removed, never replaced
    - Letters outside ASCII are transliterated, not dropped
      ("Café" -> "cafe", "Straße" -> "strasse", "Москва" -> "moskva")
    - Idempotent: slugify_code(slugify_code(x)) == slugify_code(x)
"""

import re

from slugify import slugify

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify_code(label: str) -> str:
    """Normalize a label into a lowercase, separator-free slug.

    May return an empty string when the label has no letters or digits;
    callers decide whether that is acceptable.
    """
    return _NON_ALNUM.sub("", slugify(label, separator=""))
