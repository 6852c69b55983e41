# src/wortschatz/core/dictionary.py
"""
German morphological dictionary.

Loads a lexicon from a string or a byte stream, then answers filter
queries over (word, analysis) pairs.

    d = await GermanMorphDict.load(text)
    nouns = await d.filter_words(r"^Z", [WordCategory.NOUN])

Loading runs once. Every read goes through wait_for_ready(); after that
the index is frozen and safe to share.
"""

import asyncio
import codecs
import logging
import re
import warnings
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Mapping, Union

import httpx

from wortschatz import config
from wortschatz.core.categories import WordCategory
from wortschatz.core.lexicon import LexiconIndex
from wortschatz.core.morph import FilterProgress, LoadProgress, MorphAnalysis, WordEntry
from wortschatz.core.parser import LineBuffer, RecordParser
from wortschatz.core.source import ByteSource


logger = logging.getLogger(__name__)

FILTER_PROGRESS_BATCH = 1000

LoadCallback = Callable[[LoadProgress], None]
FilterCallback = Callable[[FilterProgress], None]
WordPattern = Union[str, re.Pattern, Callable[[str], bool]]


class DictionaryLoadError(RuntimeError):
    pass


def word_matcher(pattern: WordPattern | None) -> Callable[[str], bool] | None:
    """Regex (searched anywhere in the word) or predicate → predicate."""
    if pattern is None:
        return None
    if callable(pattern):
        return pattern
    regex = re.compile(pattern)
    return lambda word: regex.search(word) is not None


@dataclass(frozen=True)
class WordFilter:
    """
    Lazy, restartable view of the entries matching a filter.

    Each iteration walks the words in insertion order, then each word's
    analyses in stored order. Nothing is materialized.
    """

    words: Mapping[str, tuple[MorphAnalysis, ...]]
    matches: Callable[[str], bool] | None = None
    categories: frozenset[WordCategory] | None = None

    def __iter__(self) -> Iterator[WordEntry]:
        for word, analyses in self.words.items():
            if self.matches is not None and not self.matches(word):
                continue
            for analysis in analyses:
                if self.categories is None or analysis.category in self.categories:
                    yield WordEntry(word, analysis)


class GermanMorphDict:
    def __init__(self, dict_data: str | ByteSource, progress_callback: LoadCallback | None = None):
        """
        Args:
            dict_data: full lexicon text, or a ByteSource to stream from
            progress_callback: receives LoadProgress while loading

        A ByteSource without a body raises ValueError right away. Text is
        parsed immediately; a stream is parsed by a task that starts now if
        an event loop is running, otherwise on the first wait_for_ready().
        """
        self._index = LexiconIndex()
        self._source: ByteSource | None = None
        self._progress_callback = progress_callback
        self._loading: asyncio.Future | None = None

        if isinstance(dict_data, ByteSource):
            if dict_data.body is None:
                raise ValueError("Response body is null")
            self._source = dict_data
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                loop = None
            if loop is not None:
                self._loading = loop.create_task(self._load_stream(dict_data, progress_callback))
        else:
            self._load_text(dict_data, progress_callback)

    @classmethod
    async def load(cls, dict_data: str | ByteSource, progress_callback: LoadCallback | None = None) -> "GermanMorphDict":
        """Construct and wait until ready."""
        dictionary = cls(dict_data, progress_callback)
        await dictionary.wait_for_ready()
        return dictionary

    @classmethod
    async def from_location(cls, location: str, progress_callback: LoadCallback | None = None) -> "GermanMorphDict":
        """Stream from a file path or an http(s) URL."""
        if not config.is_url(location):
            return await cls.load(ByteSource.from_file(location, config.chunk_size()), progress_callback)

        async with httpx.AsyncClient(timeout=config.http_timeout(), follow_redirects=True) as client:
            async with client.stream("GET", location) as response:
                response.raise_for_status()
                return await cls.load(ByteSource.from_response(response), progress_callback)

    @property
    def is_ready(self) -> bool:
        return self._index.frozen

    async def wait_for_ready(self) -> None:
        """Resolves once the index is complete. Raises DictionaryLoadError if loading failed."""
        if self._index.frozen:
            return
        if self._loading is None:
            self._loading = asyncio.ensure_future(self._load_stream(self._source, self._progress_callback))
        await self._loading

    # === Loading ===

    def _load_text(self, text: str, progress_callback: LoadCallback | None) -> None:
        index = LexiconIndex()
        parser = RecordParser(index)
        parser.feed(text)
        parser.finish()
        self._publish(index)

        if progress_callback:
            total_lines = len(text.split("\n"))
            progress_callback(LoadProgress(total_lines, total_lines, 100.0))

    async def _load_stream(self, source: ByteSource, progress_callback: LoadCallback | None) -> None:
        # Published only after the whole stream parsed
        index = LexiconIndex()
        parser = RecordParser(index)
        lines = LineBuffer()
        decoder = codecs.getincrementaldecoder("utf-8")()
        total_bytes = source.total_size
        loaded_bytes = 0

        try:
            while True:
                done, chunk = await source.read()

                if done:
                    complete = lines.push(decoder.decode(b"", final=True))
                    if complete is not None:
                        parser.feed(complete)
                    parser.feed(lines.flush())
                    parser.finish()
                    break

                loaded_bytes += len(chunk)
                complete = lines.push(decoder.decode(chunk))
                if complete is not None:
                    parser.feed(complete)

                if progress_callback and total_bytes > 0:
                    percentage = min(loaded_bytes / total_bytes * 100, 100.0)
                    progress_callback(LoadProgress(total_bytes, loaded_bytes, percentage))

            if progress_callback:
                total = total_bytes or loaded_bytes
                progress_callback(LoadProgress(total, total, 100.0))
        except Exception as e:
            raise DictionaryLoadError(f"Failed to load dictionary: {e}") from e
        finally:
            await source.aclose()

        self._publish(index)

    def _publish(self, index: LexiconIndex) -> None:
        index.freeze()
        self._index = index
        logger.info("Loaded %d words (%d entries)", len(index), index.total_entries)

    # === Queries ===

    def iter_words(
        self,
        pattern: WordPattern | None = None,
        categories: Iterable[WordCategory] | None = None,
    ) -> WordFilter:
        """
        Lazy filter. Iterate the result as often as needed.

        Needs a loaded dictionary; a plain iterator cannot wait for one.
        """
        if not self._index.frozen:
            raise RuntimeError("Dictionary is not loaded yet, await wait_for_ready() first")
        return WordFilter(
            words=self._index.view(),
            matches=word_matcher(pattern),
            categories=frozenset(categories) if categories is not None else None,
        )

    async def filter_words(
        self,
        pattern: WordPattern | None = None,
        categories: Iterable[WordCategory] | None = None,
        progress_callback: FilterCallback | None = None,
    ) -> list[WordEntry]:
        """
        Eager filter.

        Progress is reported every FILTER_PROGRESS_BATCH collected entries,
        as a share of all entries in the index, and once more at 100.
        """
        await self.wait_for_ready()
        total = self._index.total_entries
        result = []

        for entry in self.iter_words(pattern, categories):
            result.append(entry)
            if progress_callback and len(result) % FILTER_PROGRESS_BATCH == 0:
                progress_callback(FilterProgress(len(result), total, len(result) / total * 100))

        if progress_callback:
            progress_callback(FilterProgress(total, total, 100.0))

        return result

    async def combine_filters(
        self,
        pattern: WordPattern | None = None,
        categories: Iterable[WordCategory] | None = None,
        progress_callback: FilterCallback | None = None,
    ) -> list[WordEntry]:
        """Deprecated alias for filter_words."""
        warnings.warn("combine_filters() is deprecated, use filter_words()", DeprecationWarning, stacklevel=2)
        return await self.filter_words(pattern, categories, progress_callback)

    async def get_dictionary(self) -> list[WordEntry]:
        """All entries."""
        await self.wait_for_ready()
        return list(self._index.entries())

    async def lookup(self, word: str) -> list[WordEntry]:
        await self.wait_for_ready()
        return self._index.lookup_word(word)

    async def stats(self) -> dict:
        await self.wait_for_ready()
        return {"words": len(self._index), "entries": self._index.total_entries}
