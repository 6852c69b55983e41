"""
Load the lexicon for a CLI command, with a progress bar.
"""

from rich.console import Console
from rich.progress import Progress

from wortschatz.core.dictionary import GermanMorphDict
from wortschatz.core.morph import LoadProgress


async def load_dictionary(source: str) -> GermanMorphDict:
    with Progress(console=Console(stderr=True), transient=True) as progress:
        task = progress.add_task(f"Loading {source}", total=100)

        def on_progress(p: LoadProgress):
            progress.update(task, completed=p.percentage)

        return await GermanMorphDict.from_location(source, on_progress)
