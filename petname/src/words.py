"""Word-list loading: built-in lists and user-supplied directories.

A word list is plain text with words separated by any whitespace. There is
no quoting, no comments and no escaping.
"""

from __future__ import annotations

import functools
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

WORDS_DIR = Path(__file__).parent.parent / "words"

LIST_NAMES = ("adjectives", "adverbs", "nouns")

# complexity level (CLI) → built-in list size
SIZES = ("small", "medium", "large")
DEFAULT_SIZE = "medium"

# Older word directories used names.txt for the noun list
LEGACY_NOUNS_FILE = "names.txt"


def split_words(text: str) -> tuple[str, ...]:
    """Split text on whitespace, keeping order and duplicates."""
    return tuple(text.split())


def split_words_deduplicate_and_sort(text: str) -> tuple[str, ...]:
    return tuple(sorted(set(text.split())))


@functools.cache
def builtin_list(size: str, list_name: str) -> tuple[str, ...]:
    """Load one built-in word list. Loaded once, then shared."""
    if size not in SIZES:
        raise ValueError(f"Unknown word list size: {size!r} (expected one of {', '.join(SIZES)})")
    if list_name not in LIST_NAMES:
        raise ValueError(f"Unknown word list: {list_name!r}")
    path = WORDS_DIR / size / f"{list_name}.txt"
    words = split_words_deduplicate_and_sort(path.read_text(encoding="utf-8"))
    logger.debug("Loaded %d %s from %s", len(words), list_name, path)
    return words


def builtin_lists(size: str = DEFAULT_SIZE) -> dict[str, tuple[str, ...]]:
    return {list_name: builtin_list(size, list_name) for list_name in LIST_NAMES}


def list_path(directory: Path, list_name: str) -> Path:
    """Path of a word list within a directory, honouring the legacy noun file."""
    path = directory / f"{list_name}.txt"
    if list_name == "nouns" and not path.exists():
        legacy = directory / LEGACY_NOUNS_FILE
        if legacy.exists():
            logger.info("Using legacy %s for nouns in %s", LEGACY_NOUNS_FILE, directory)
            return legacy
    return path


def read_directory(directory: Path) -> dict[str, str]:
    """Read the raw text of each word list in `directory`.

    Raises FileNotFoundError if a list is missing.
    """
    if not directory.is_dir():
        raise NotADirectoryError(f"Word list directory not found: {directory}")
    texts = {}
    for list_name in LIST_NAMES:
        path = list_path(directory, list_name)
        if not path.exists():
            raise FileNotFoundError(f"Missing word list {path.name} in {directory}")
        texts[list_name] = path.read_text(encoding="utf-8")
    return texts


def read_directories(directories: list[Path]) -> dict[str, str]:
    """Read and concatenate word lists from several directories."""
    combined: dict[str, list[str]] = {list_name: [] for list_name in LIST_NAMES}
    for directory in directories:
        for list_name, text in read_directory(directory).items():
            combined[list_name].append(text)
    return {list_name: "\n".join(texts) for list_name, texts in combined.items()}
