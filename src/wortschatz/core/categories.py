# src/wortschatz/core/categories.py
"""
Closed tag sets used by the morphology lexicon.

WordCategory is the part-of-speech tag right after the lemma:
    "Tisch NN,masc,nom,sing" → WordCategory.NOUN
"""

from enum import Enum


class WordCategory(str, Enum):
    VERB = "V"
    ADJECTIVE = "ADJ"
    ADVERB = "ADV"
    ARTICLE = "ART"
    CARDINAL = "CARD"
    CIRCUMPOSITION = "CIRCP"
    CONJUNCTION = "CONJ"
    DEMONSTRATIVE = "DEMO"
    INDEFINITE = "INDEF"
    INTERJECTION = "INTJ"
    ORDINAL = "ORD"
    NOUN = "NN"
    PROPER_NOUN = "NNP"
    POSSESSIVE = "POSS"
    POSTPOSITION = "POSTP"
    PRONOUN = "PRP"
    PREPOSITION = "PREP"
    PREPOSITION_ARTICLE = "PREPART"
    PRONOMINAL_ADVERB = "PROADV"
    PARTICLE = "PRTKL"
    RELATIVE = "REL"
    TRUNCATED = "TRUNC"
    VERB_PARTICLE = "VPART"
    WH_ADVERB = "WPADV"
    WH_PRONOUN = "WPRO"
    ZU = "ZU"

    @classmethod
    def parse(cls, tag: str) -> "WordCategory | None":
        """Tag → category, or None if the tag is not one of ours."""
        try:
            return cls(tag)
        except ValueError:
            return None


class Gender(str, Enum):
    MASC = "masc"
    FEM = "fem"
    NEUT = "neut"


def parse_categories(names: list[str] | None) -> list[WordCategory] | None:
    """
    Parse category names coming from the CLI or the API.

    Accepts tags ("NN") and member names ("noun"). Raises ValueError on
    anything else.
    """
    if not names:
        return None

    categories = []
    for name in names:
        category = WordCategory.parse(name)
        if category is None:
            category = WordCategory.__members__.get(name.upper())
        if category is None:
            available = ", ".join(c.value for c in WordCategory)
            raise ValueError(f"Unknown category: {name}. Available: {available}")
        categories.append(category)
    return categories
