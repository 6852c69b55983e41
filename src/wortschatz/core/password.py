# src/wortschatz/core/password.py
"""
Passphrase-style passwords from adjective + noun pairs.

The adjective agrees with the noun in gender:
    masc: "starker" + "Tisch"  → "starkerTisch"
    fem:  "stille" + "Tasse"   → "stilleTasse"

Strong mode keeps only words without umlauts/ß/y/z, swaps one of
S,s,I,i,T,t for $, ! or +, and appends two digits:
    "stilleTasse" → "s!illeTasse42"
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum

from wortschatz.core.categories import Gender, WordCategory
from wortschatz.core.dictionary import GermanMorphDict
from wortschatz.core.morph import WordEntry


logger = logging.getLogger(__name__)

SPECIAL_CHARS = ("$", "!", "+")
FILTERED_CHARS = frozenset("ÄäÖöÜüẞßYyZz")
REPLACEABLE_CHARS = frozenset("SsIiTt")
DIGIT_COUNT = 2


class PasswordMode(str, Enum):
    SIMPLE = "simple"
    STRONG = "strong"


class NoValidWordsError(LookupError):
    def __init__(self, gender: Gender, mode: PasswordMode | None = None):
        self.gender = gender
        self.mode = mode
        message = f"No valid words found for gender: {gender.value}"
        if mode is not None:
            message += f" in mode: {mode.value}"
        super().__init__(message)


class NoPasswordsGeneratedError(RuntimeError):
    pass


@dataclass
class GenderPools:
    nouns: dict[Gender, list[WordEntry]]
    adjectives: dict[Gender, list[WordEntry]]


def is_strong_candidate(word: str) -> bool:
    """No filtered character, at least one replaceable one."""
    if any(c in FILTERED_CHARS for c in word):
        return False
    return any(c in REPLACEABLE_CHARS for c in word)


def _adjective_fits(entry: WordEntry, gender: Gender) -> bool:
    attributes = entry.analysis.attributes
    if gender.value not in attributes:
        return False
    # fem is not checked for declension
    return gender is Gender.FEM or "strong" in attributes


class PasswordGenerator:
    def __init__(self, dictionary: GermanMorphDict, rng: random.Random | None = None):
        self.dict = dictionary
        self.rng = rng or random.Random()

    async def gender_pools(self) -> GenderPools:
        """Nominative singular nouns and positive adjectives, grouped by gender."""
        nouns = await self.dict.filter_words(categories=[WordCategory.NOUN])
        nom_sing_nouns = [n for n in nouns if n.analysis.has("nom", "sing")]

        adjectives = await self.dict.filter_words(categories=[WordCategory.ADJECTIVE])
        base_adjectives = [a for a in adjectives if a.analysis.has("pos", "nom", "sing")]

        return GenderPools(
            nouns={g: [n for n in nom_sing_nouns if g.value in n.analysis.attributes] for g in Gender},
            adjectives={g: [a for a in base_adjectives if _adjective_fits(a, g)] for g in Gender},
        )

    async def generate_password(self, mode: PasswordMode, gender: Gender | None = None) -> str:
        """
        One password. Gender is random unless given.

        Raises NoValidWordsError if the chosen gender has no adjective or
        no noun (in strong mode: none that survive the character rules).
        """
        pools = await self.gender_pools()
        if gender is None:
            gender = self.rng.choice(list(Gender))

        adjectives = pools.adjectives[gender]
        nouns = pools.nouns[gender]
        if not adjectives or not nouns:
            raise NoValidWordsError(gender)

        if mode is PasswordMode.STRONG:
            adjectives = [a for a in adjectives if is_strong_candidate(a.word)]
            nouns = [n for n in nouns if is_strong_candidate(n.word)]
            if not adjectives or not nouns:
                raise NoValidWordsError(gender, mode)

        adjective = self.rng.choice(adjectives)
        noun = self.rng.choice(nouns)
        password = adjective.word + noun.word

        if mode is PasswordMode.STRONG:
            password = self._replace_special_char(password)
            password += self._random_digits(DIGIT_COUNT)

        return password

    async def generate_passwords(self, mode: PasswordMode, count: int = 10) -> list[str]:
        """
        Up to `count` distinct passwords, trying at most 3 * count times.

        Failed attempts are logged and skipped. Raises
        NoPasswordsGeneratedError if nothing came out at all.
        """
        if count < 1:
            raise ValueError(f"count must be at least 1, got {count}")

        passwords: list[str] = []
        seen: set[str] = set()

        for attempt in range(count * 3):
            if len(passwords) >= count:
                break
            try:
                password = await self.generate_password(mode)
            except NoValidWordsError as e:
                logger.warning("Attempt %d failed: %s", attempt + 1, e)
                continue
            if password not in seen:
                seen.add(password)
                passwords.append(password)

        if not passwords:
            raise NoPasswordsGeneratedError(f"No passwords generated in mode: {mode.value}")

        logger.debug("Generated %d/%d %s passwords", len(passwords), count, mode.value)
        return passwords

    def _replace_special_char(self, password: str) -> str:
        positions = [i for i, c in enumerate(password) if c in REPLACEABLE_CHARS]
        if not positions:
            return password
        i = self.rng.choice(positions)
        return password[:i] + self.rng.choice(SPECIAL_CHARS) + password[i + 1:]

    def _random_digits(self, length: int) -> str:
        return "".join(str(self.rng.randrange(10)) for _ in range(length))
