# src/wortschatz/core/parser.py
"""
Line parser for the morphology lexicon.

Format:
    aktiver
    aktiv ADJ,masc,nom,sing,pos,strong

    Zelt
    Zelt NN,neut,nom,sing
    Zelt NN,masc,nom,sing

A line without a comma starts a new word. A line with a comma is one
analysis of the current word. Anything that does not parse is skipped.
"""

import logging
from dataclasses import dataclass, field

from wortschatz.core.categories import WordCategory
from wortschatz.core.lexicon import LexiconIndex
from wortschatz.core.morph import MorphAnalysis


logger = logging.getLogger(__name__)


def parse_analysis(line: str) -> MorphAnalysis | None:
    """Parse "<lemma> <CAT>,<attr>,..." or return None."""
    parts = line.split(" ")
    if len(parts) < 2:
        return None

    lemma, analysis = parts[0], parts[1]
    if not lemma or not analysis:
        return None

    category_tag, *attributes = analysis.split(",")
    category = WordCategory.parse(category_tag)
    if category is None:
        return None

    return MorphAnalysis(lemma, category, tuple(attributes))


@dataclass
class RecordParser:
    """
    Turns lines into committed records.

    State is the word being read and its analyses so far. A record is
    committed when the next header arrives or when finish() is called,
    so a record may span any number of feed() calls.
    """

    index: LexiconIndex
    pending_word: str | None = None
    pending_analyses: list[MorphAnalysis] = field(default_factory=list)
    lines_seen: int = 0
    committed: int = 0

    def feed(self, text: str) -> None:
        """Parse complete lines. The caller must not split a line across calls."""
        for line in text.split("\n"):
            self.feed_line(line)

    def feed_line(self, line: str) -> None:
        self.lines_seen += 1
        line = line.strip()
        if not line:
            return

        if "," not in line:
            self._commit()
            self.pending_word = line
            self.pending_analyses = []
            return

        analysis = parse_analysis(line)
        if analysis is not None:
            self.pending_analyses.append(analysis)

    def finish(self) -> None:
        """End of input: commit whatever is pending."""
        self._commit()
        logger.debug("Parsed %d lines, committed %d words", self.lines_seen, self.committed)

    def _commit(self) -> None:
        if self.index.add(self.pending_word, self.pending_analyses):
            self.committed += 1
        self.pending_word = None
        self.pending_analyses = []


class LineBuffer:
    """
    Holds the tail of the text after the last newline.

    push() returns only text that ends on a line boundary; the rest is
    kept and prefixed to the next push.
    """

    def __init__(self):
        self._buffer = ""

    def push(self, text: str) -> str | None:
        self._buffer += text
        last_newline = self._buffer.rfind("\n")
        if last_newline == -1:
            return None
        complete = self._buffer[:last_newline]
        self._buffer = self._buffer[last_newline + 1:]
        return complete

    def flush(self) -> str:
        rest, self._buffer = self._buffer, ""
        return rest
