"""
Shared dependencies for routes.
"""

import random

from wortschatz import config
from wortschatz.core.dictionary import GermanMorphDict
from wortschatz.core.password import PasswordGenerator


_dictionary: GermanMorphDict | None = None


def set_dictionary(dictionary: GermanMorphDict | None) -> None:
    """Replace the process-wide dictionary (tests, embedding)."""
    global _dictionary
    _dictionary = dictionary


async def get_dictionary() -> GermanMorphDict:
    """Loaded once per process from $WORTSCHATZ_DICT."""
    global _dictionary
    if _dictionary is None:
        _dictionary = await GermanMorphDict.from_location(config.dict_source())
    await _dictionary.wait_for_ready()
    return _dictionary


async def get_generator(seed: int | None = None) -> PasswordGenerator:
    rng = random.Random(seed) if seed is not None else None
    return PasswordGenerator(await get_dictionary(), rng)
