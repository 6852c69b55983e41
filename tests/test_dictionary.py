# tests/test_dictionary.py
"""Tests for dictionary loading and filtering."""

import asyncio
import random

import httpx
import pytest

from wortschatz.core.categories import WordCategory
from wortschatz.core.dictionary import DictionaryLoadError, GermanMorphDict
from wortschatz.core.source import ByteSource


TEST_DATA = """
Wetter
Wetter NN,neut,nom,sing
Wetter NN,masc,nom,sing

Wiese
Wiese NN,fem,nom,sing

Würfel
Würfel NN,masc,nom,sing

Zahn
Zahn NN,masc,nom,sing

Zange
Zange NN,fem,nom,sing

Zaun
Zaun NN,masc,nom,sing

Zebra
Zebra NN,neut,nom,sing

Zelt
Zelt NN,neut,nom,sing
Zelt NN,masc,nom,sing

Zimmer
Zimmer NN,neut,nom,sing

Zucker
Zucker NN,masc,nom,sing

aktiver
aktiv ADJ,masc,nom,sing,pos,strong

aktiverer
aktiv ADJ,masc,nom,sing,comp,strong

aktiveres
aktiv ADJ,neut,nom,sing,comp,strong

aktives
aktiv ADJ,neut,nom,sing,pos,strong

aktivster
aktiv ADJ,masc,nom,sing,sup,strong

aktivstes
aktiv ADJ,neut,nom,sing,sup,strong

bekannter
bekannt ADJ,masc,nom,sing,pos,strong

berühmter
berühmt ADJ,masc,nom,sing,pos,strong
berühmt BOGUS,masc,nom,sing,pos,strong
"""


def load(data, progress_callback=None) -> GermanMorphDict:
    return asyncio.run(GermanMorphDict.load(data, progress_callback))


def chunked(data: bytes, sizes: list[int]) -> list[bytes]:
    chunks = []
    pos = 0
    for size in sizes:
        chunks.append(data[pos:pos + size])
        pos += size
    chunks.append(data[pos:])
    return chunks


def snapshot(dictionary: GermanMorphDict) -> list:
    return asyncio.run(dictionary.get_dictionary())


@pytest.fixture
def dictionary():
    return load(TEST_DATA)


# === Filtering ===

def test_filter_by_regex_and_category(dictionary):
    words = asyncio.run(dictionary.filter_words(r"Z[a-e][a-z]*", [WordCategory.NOUN]))

    assert len(words) == 6
    unique = {w.word for w in words}
    assert unique == {"Zahn", "Zange", "Zaun", "Zebra", "Zelt"}
    zelt_genders = [w.analysis.attributes[0] for w in words if w.word == "Zelt"]
    assert sorted(zelt_genders) == ["masc", "neut"]


def test_combine_filters_is_deprecated_alias(dictionary):
    with pytest.warns(DeprecationWarning):
        words = asyncio.run(dictionary.combine_filters(r"akt.*", [WordCategory.ADJECTIVE]))

    assert sorted(w.word for w in words) == sorted(
        ["aktiver", "aktiverer", "aktiveres", "aktives", "aktivster", "aktivstes"]
    )


def test_filter_no_matches(dictionary):
    assert asyncio.run(dictionary.filter_words(r"xyz123")) == []


def test_preserves_morphological_variations(dictionary):
    results = asyncio.run(dictionary.filter_words(r"Zelt"))

    assert [r.word for r in results] == ["Zelt", "Zelt"]
    assert [r.analysis.attributes[0] for r in results] == ["neut", "masc"]


def test_category_only_count_matches_valid_lines(dictionary):
    adjective_lines = [
        line for line in TEST_DATA.splitlines()
        if len(line.split(" ")) > 1 and line.split(" ")[1].startswith("ADJ,")
    ]
    adjectives = asyncio.run(dictionary.filter_words(categories=[WordCategory.ADJECTIVE]))

    assert len(adjectives) == len(adjective_lines) == 8


def test_empty_category_set_matches_nothing(dictionary):
    assert asyncio.run(dictionary.filter_words(categories=[])) == []


def test_filter_with_predicate(dictionary):
    words = asyncio.run(dictionary.filter_words(lambda w: w.endswith("er"), [WordCategory.NOUN]))
    assert {w.word for w in words} == {"Wetter", "Zimmer", "Zucker"}


def test_iter_words_is_lazy_and_restartable(dictionary):
    view = dictionary.iter_words(r"^Z", [WordCategory.NOUN])

    first = next(iter(view))
    assert first.word == "Zahn"
    assert list(view) == list(view)
    assert len(list(view)) == 8


def test_iter_words_order_matches_eager(dictionary):
    eager = asyncio.run(dictionary.filter_words())
    assert list(dictionary.iter_words()) == eager == snapshot(dictionary)


def test_iter_words_before_ready_raises():
    async def run():
        d = GermanMorphDict(ByteSource.from_chunks([TEST_DATA.encode()]))
        with pytest.raises(RuntimeError):
            d.iter_words()
        await d.wait_for_ready()
        return len(list(d.iter_words()))

    assert asyncio.run(run()) == 20


def test_lookup_and_stats(dictionary):
    entries = asyncio.run(dictionary.lookup("Wetter"))
    assert len(entries) == 2
    assert asyncio.run(dictionary.lookup("Nichts")) == []

    stats = asyncio.run(dictionary.stats())
    assert stats == {"words": 18, "entries": 20}


# === Progress ===

def test_text_load_progress_reported_once():
    updates = []
    load(TEST_DATA, updates.append)

    assert len(updates) == 1
    assert updates[0].percentage == 100
    assert updates[0].processed_units == updates[0].total_units == len(TEST_DATA.split("\n"))


def test_filter_progress_reaches_100(dictionary):
    updates = []
    asyncio.run(dictionary.filter_words(r".*", None, updates.append))

    assert updates[-1].percentage == 100
    assert updates[-1].total_entries == 20


def test_filter_progress_batches_use_index_total():
    lines = []
    for i in range(2500):
        lines += [f"Wort{i}", f"Wort{i} NN,masc,nom,sing", f"Wort{i} ADJ,masc,nom,sing,pos,strong"]
    d = load("\n".join(lines))

    updates = []
    nouns = asyncio.run(d.filter_words(categories=[WordCategory.NOUN], progress_callback=updates.append))

    assert len(nouns) == 2500
    assert [u.processed_entries for u in updates] == [1000, 2000, 5000]
    assert all(u.total_entries == 5000 for u in updates)
    assert [u.percentage for u in updates] == pytest.approx([20.0, 40.0, 100.0])


def test_stream_progress_monotonic():
    data = TEST_DATA.encode()
    updates = []
    load(ByteSource.from_chunks(chunked(data, [7] * 40), total_size=len(data)), updates.append)

    percentages = [u.percentage for u in updates]
    assert percentages == sorted(percentages)
    assert percentages[-1] == 100
    assert len(updates) > 2


def test_stream_without_total_reports_only_final():
    data = TEST_DATA.encode()
    updates = []
    load(ByteSource.from_chunks(chunked(data, [100, 100])), updates.append)

    assert len(updates) == 1
    assert updates[0].percentage == 100
    assert updates[0].total_units == len(data)


# === Streaming ===

def test_chunk_boundary_invariance():
    expected = snapshot(load(TEST_DATA))
    data = TEST_DATA.encode()
    rng = random.Random(7)

    for _ in range(20):
        sizes = [rng.randint(1, 40) for _ in range(rng.randint(1, 30))]
        streamed = load(ByteSource.from_chunks(chunked(data, sizes)))
        assert snapshot(streamed) == expected


def test_split_inside_multibyte_character():
    data = "Würfel\nWürfel NN,masc,nom,sing\n".encode()
    split = data.index("ü".encode()) + 1
    d = load(ByteSource.from_chunks([data[:split], data[split:]]))

    assert [e.word for e in snapshot(d)] == ["Würfel"]


def test_stream_without_trailing_newline():
    data = b"Tisch\nTisch NN,masc,nom,sing"
    d = load(ByteSource.from_chunks([data]))
    assert len(snapshot(d)) == 1


def test_empty_stream():
    d = load(ByteSource.from_chunks([]))
    assert snapshot(d) == []


def test_lazy_task_when_constructed_outside_loop():
    d = GermanMorphDict(ByteSource.from_chunks([TEST_DATA.encode()]))
    assert not d.is_ready

    asyncio.run(d.wait_for_ready())
    assert d.is_ready


def test_missing_body_raises_immediately():
    with pytest.raises(ValueError, match="body"):
        GermanMorphDict(ByteSource(body=None))


def test_decode_error_fails_gate():
    d = GermanMorphDict(ByteSource.from_chunks([b"Tisch\n", b"\xff\xfe\n"]))

    with pytest.raises(DictionaryLoadError, match="Failed to load dictionary"):
        asyncio.run(d.wait_for_ready())
    assert not d.is_ready


def test_read_error_fails_gate():
    async def broken():
        yield b"Tisch\nTisch NN,masc,nom,sing\n"
        raise OSError("connection reset")

    d = GermanMorphDict(ByteSource(body=broken()))

    with pytest.raises(DictionaryLoadError, match="connection reset") as exc:
        asyncio.run(d.wait_for_ready())
    assert isinstance(exc.value.__cause__, OSError)


def test_load_from_file(tmp_path):
    path = tmp_path / "lexicon.txt"
    path.write_text(TEST_DATA, encoding="utf-8")
    updates = []

    d = asyncio.run(GermanMorphDict.from_location(str(path), updates.append))

    assert snapshot(d) == snapshot(load(TEST_DATA))
    assert updates[-1].percentage == 100


def test_load_from_httpx_response():
    data = TEST_DATA.encode()

    def handler(request):
        return httpx.Response(200, content=data)

    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            async with client.stream("GET", "http://lexicon.test/morph.txt") as response:
                source = ByteSource.from_response(response)
                assert source.total_size == len(data)
                d = await GermanMorphDict.load(source)
        return await d.filter_words(r"Zelt")

    assert len(asyncio.run(run())) == 2
