# src/wortschatz/core/lexicon.py
"""
In-memory lexicon index.

Maps surface words to their morphological analyses.
"Zelt" → [Zelt NN,neut,nom,sing], [Zelt NN,masc,nom,sing]

Filled once by the loader, then frozen and only read.
"""

from types import MappingProxyType
from typing import Iterator, Mapping

from wortschatz.core.morph import MorphAnalysis, WordEntry


class LexiconIndex:
    def __init__(self):
        self._words: dict[str, tuple[MorphAnalysis, ...]] = {}
        self._total_entries = 0
        self._frozen = False

    def add(self, word: str, analyses: list[MorphAnalysis]) -> bool:
        """
        Store the analyses of a word. Replaces an earlier block for the same word.

        Returns False (and stores nothing) for an empty word or no analyses.
        """
        if self._frozen:
            raise RuntimeError("Lexicon index is frozen")
        if not word or not analyses:
            return False

        previous = self._words.get(word)
        if previous is not None:
            self._total_entries -= len(previous)

        self._words[word] = tuple(analyses)
        self._total_entries += len(analyses)
        return True

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def total_entries(self) -> int:
        """Number of (word, analysis) pairs."""
        return self._total_entries

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return word in self._words

    def lookup_word(self, word: str) -> list[WordEntry]:
        """Get all entries for a word."""
        return [WordEntry(word, a) for a in self._words.get(word, ())]

    def view(self) -> Mapping[str, tuple[MorphAnalysis, ...]]:
        """Read-only view of word → analyses, in insertion order."""
        return MappingProxyType(self._words)

    def entries(self) -> Iterator[WordEntry]:
        for word, analyses in self._words.items():
            for analysis in analyses:
                yield WordEntry(word, analysis)
