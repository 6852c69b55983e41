"""
Lexicon commands.
"""

import asyncio
import sys
from itertools import islice

from rich import print_json

from wortschatz.cli.loading import load_dictionary
from wortschatz.core.categories import parse_categories


def add_subparser(subparsers):
    parser = subparsers.add_parser("words", help="Query the lexicon")
    words_sub = parser.add_subparsers(dest="words_command", required=True)

    # filter
    filter_p = words_sub.add_parser("filter", help="List entries by pattern and category")
    filter_p.add_argument("--pattern", "-p", help="Regex searched in the word")
    filter_p.add_argument("--category", "-c", nargs="+", help="Category tags, e.g. NN ADJ")
    filter_p.add_argument("--limit", type=int, default=50, help="Max entries (0 = all)")
    filter_p.add_argument("--json", action="store_true", help="Output JSON")
    filter_p.set_defaults(func=words_filter)

    # show
    show_p = words_sub.add_parser("show", help="Show analyses of one word")
    show_p.add_argument("word", help="Surface form")
    show_p.set_defaults(func=words_show)

    # stats
    stats_p = words_sub.add_parser("stats", help="Word and entry counts")
    stats_p.set_defaults(func=words_stats)


async def _filter(args):
    categories = parse_categories(args.category)
    dictionary = await load_dictionary(args.dict_source)
    entries = dictionary.iter_words(args.pattern, categories)
    if args.limit:
        return list(islice(entries, args.limit))
    return list(entries)


def words_filter(args):
    try:
        entries = asyncio.run(_filter(args))
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    if args.json:
        print_json(data=[e.to_dict() for e in entries])
        return
    if not entries:
        print("No matching entries.")
        return
    for e in entries:
        a = e.analysis
        print(f"{e.word:24} {a.lemma:20} {a.category.value:8} {','.join(a.attributes)}")


async def _show(args):
    dictionary = await load_dictionary(args.dict_source)
    return await dictionary.lookup(args.word)


def words_show(args):
    try:
        entries = asyncio.run(_show(args))
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    if not entries:
        print(f"✗ Not in lexicon: {args.word}")
        sys.exit(1)
    print(f"{args.word} ({len(entries)} analyses)")
    for e in entries:
        a = e.analysis
        print(f"  {a.lemma} {a.category.value},{','.join(a.attributes)}")


async def _stats(args):
    dictionary = await load_dictionary(args.dict_source)
    return await dictionary.stats()


def words_stats(args):
    try:
        stats = asyncio.run(_stats(args))
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    print(f"✓ {args.dict_source}")
    print(f"  words: {stats['words']}")
    print(f"  entries: {stats['entries']}")
