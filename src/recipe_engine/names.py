"""
Ingredient / pantry name canonicalization used for availability matching.

"  Tomatoes, " -> "tomato", "Red  Onions" -> "red onion", "Molasses" -> "molasses".
"""
from __future__ import annotations
import string

_EDGE_PUNCTUATION = string.punctuation + "“”‘’«»…–—"

# Words that end in "s" but are not plurals
SINGULAR_EXCEPTIONS = frozenset({
    "molasses", "hummus", "couscous", "asparagus", "citrus", "swiss",
    "brussels", "grits", "series", "species", "herbes", "schnapps",
})

IRREGULAR_PLURALS = {
    "berries": "berry",
    "cherries": "cherry",
    "strawberries": "strawberry",
    "blueberries": "blueberry",
    "raspberries": "raspberry",
    "cranberries": "cranberry",
    "anchovies": "anchovy",
    "leaves": "leaf",
    "loaves": "loaf",
    "halves": "half",
    "knives": "knife",
    "geese": "goose",
    "mice": "mouse",
}

_ES_SUFFIXES = ("oes", "ches", "shes", "xes", "zes", "sses")
_NON_PLURAL_ENDINGS = ("ss", "us", "is")


def singularize(word: str) -> str:
    if word in SINGULAR_EXCEPTIONS:
        return word
    if word in IRREGULAR_PLURALS:
        return IRREGULAR_PLURALS[word]
    if len(word) <= 3 or not word.endswith("s") or word.endswith(_NON_PLURAL_ENDINGS):
        return word
    if word.endswith(_ES_SUFFIXES):
        return word[:-2]
    return word[:-1]


def normalize_name(name: str) -> str:
    tokens = []
    for raw in (name or "").lower().split():
        token = raw.strip(_EDGE_PUNCTUATION)
        if token:
            tokens.append(singularize(token))
    return " ".join(tokens)


def names_match(a: str, b: str) -> bool:
    """Loose match on normalized names: equal, or one contains the other."""
    if not a or not b:
        return False
    return a == b or a in b or b in a
