"""
Password commands.
"""

import asyncio
import random
import sys

from wortschatz.cli.loading import load_dictionary
from wortschatz.core.categories import Gender
from wortschatz.core.password import PasswordGenerator, PasswordMode


def add_subparser(subparsers):
    parser = subparsers.add_parser("pw", help="Generate passwords")
    parser.add_argument("mode", choices=[m.value for m in PasswordMode], help="Password mode")
    parser.add_argument("--count", "-n", type=int, default=10, help="How many passwords")
    parser.add_argument("--gender", choices=[g.value for g in Gender],
                        help="Fix the gender (generates a single password)")
    parser.add_argument("--seed", type=int, help="Seed for reproducible output")
    parser.set_defaults(func=pw_generate)


async def _generate(args) -> list[str]:
    dictionary = await load_dictionary(args.dict_source)
    rng = random.Random(args.seed) if args.seed is not None else None
    generator = PasswordGenerator(dictionary, rng)
    mode = PasswordMode(args.mode)

    if args.gender:
        return [await generator.generate_password(mode, Gender(args.gender))]
    return await generator.generate_passwords(mode, args.count)


def pw_generate(args):
    try:
        passwords = asyncio.run(_generate(args))
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    for password in passwords:
        print(password)
