# src/wortschatz/core/morph.py
"""
Records produced by the lexicon parser and the progress reports
handed to callbacks.
"""

from dataclasses import dataclass

from wortschatz.core.categories import WordCategory


@dataclass(frozen=True)
class MorphAnalysis:
    lemma: str                   # "stark"
    category: WordCategory       # WordCategory.ADJECTIVE
    attributes: tuple[str, ...]  # ("masc", "nom", "sing", "pos", "strong")

    def has(self, *attributes: str) -> bool:
        """True if every given attribute is present."""
        return all(a in self.attributes for a in attributes)

    def to_dict(self) -> dict:
        return {
            "lemma": self.lemma,
            "category": self.category.value,
            "attributes": list(self.attributes),
        }


@dataclass(frozen=True)
class WordEntry:
    word: str
    analysis: MorphAnalysis

    def to_dict(self) -> dict:
        return {"word": self.word, **self.analysis.to_dict()}


@dataclass(frozen=True)
class LoadProgress:
    total_units: int      # bytes for streams, lines for text
    processed_units: int
    percentage: float


@dataclass(frozen=True)
class FilterProgress:
    processed_entries: int
    total_entries: int    # whole index, not the filtered count
    percentage: float
