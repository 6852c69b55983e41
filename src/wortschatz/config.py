"""
Settings read from the environment.
"""

import os


DEFAULT_DICT = "dictionaries/german-morph.txt"


def dict_source() -> str:
    """Path or http(s) URL of the lexicon."""
    return os.environ.get("WORTSCHATZ_DICT", DEFAULT_DICT)


def http_timeout() -> float:
    return float(os.environ.get("WORTSCHATZ_HTTP_TIMEOUT", "60"))


def chunk_size() -> int:
    return int(os.environ.get("WORTSCHATZ_CHUNK_SIZE", "65536"))


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))
