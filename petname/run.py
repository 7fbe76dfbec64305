"""CLI entrypoint for petname: generate human readable random names."""

from __future__ import annotations

import argparse
import logging
import os
import random
import sys
from collections.abc import Iterable, Iterator
from itertools import islice
from pathlib import Path
from typing import TextIO

import yaml

from petname.src.alliterations import Alliterations
from petname.src.generator import Generator
from petname.src.petnames import Petnames
from petname.src.words import SIZES

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

DEFAULT_CONFIG = Path(__file__).parent / "config" / "default.yaml"


def load_config(config_path: Path) -> dict:
    """Load YAML config with inheritance support."""
    with open(config_path) as f:
        config = yaml.safe_load(f) or {}

    # Handle inherits
    if "inherits" in config:
        base_name = config.pop("inherits")
        base_path = config_path.parent.parent / f"{base_name}.yaml"
        base = load_config(base_path)
        config = _deep_merge(base, config)

    return config


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="petname",
        description="Generate human readable random names.",
        epilog="Based on Dustin Kirkland's petname project <https://github.com/dustinkirkland/petname>.",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to config YAML")
    parser.add_argument("-w", "--words", type=int, metavar="WORDS", help="Number of words in name (default 2)")
    parser.add_argument("-s", "--separator", metavar="SEP", help="Separator between words (default '-')")

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-c", "--complexity", type=int, choices=range(len(SIZES)), metavar="COM",
        help="Use small words (0), medium words (1), or large words (2)",
    )
    source.add_argument(
        "-d", "--dir", type=Path, action="append", dest="directories", metavar="DIR",
        help="Directory containing adjectives.txt, adverbs.txt, nouns.txt (repeatable)",
    )

    amount = parser.add_mutually_exclusive_group()
    amount.add_argument("--count", type=int, metavar="COUNT", help="Generate multiple names (default 1)")
    amount.add_argument("--stream", action="store_true", default=None, help="Stream names continuously")

    parser.add_argument(
        "--non-repeating", action="store_true", default=None,
        help="Do not generate the same name more than once",
    )
    parser.add_argument(
        "-l", "--letters", type=int, metavar="LETTERS",
        help="Maximum number of letters in each word; 0 for unlimited",
    )
    parser.add_argument(
        "-a", "--alliterate", action="store_true", default=None,
        help="Generate names where each word begins with the same letter",
    )
    parser.add_argument(
        "-A", "--alliterate-with", metavar="LETTER",
        help="Generate names where each word begins with the given letter",
    )
    # For compatibility with upstream petname.
    parser.add_argument("-u", "--ubuntu", action="store_true", help="Alias; see --alliterate")
    parser.add_argument("--seed", type=int, help="Seed the random number generator for repeatable output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log what is going on to stderr")
    return parser


def _apply_overrides(config: dict, args: argparse.Namespace) -> dict:
    """Layer command-line flags over the loaded config."""
    overrides: dict = {"generation": {}, "words": {}, "alliteration": {}}
    for key in ("words", "separator", "count", "stream", "non_repeating", "seed"):
        value = getattr(args, key)
        if value is not None:
            overrides["generation"][key] = value
    if args.stream:
        overrides["generation"]["count"] = None
    elif args.count is not None:
        overrides["generation"]["stream"] = False
    if args.complexity is not None:
        overrides["words"]["complexity"] = args.complexity
        overrides["words"]["directories"] = []
    if args.directories:
        overrides["words"]["directories"] = [str(d) for d in args.directories]
    if args.letters is not None:
        overrides["words"]["letters"] = args.letters
    if args.alliterate or args.ubuntu:
        overrides["alliteration"]["enabled"] = True
    if args.alliterate_with is not None:
        overrides["alliteration"]["letter"] = args.alliterate_with
    return _deep_merge(config, overrides)


def load_petnames(words_config: dict) -> Petnames:
    """Word lists from the configured directories, or the built-in lists."""
    directories = words_config.get("directories") or []
    if directories:
        petnames = Petnames.from_directories([Path(d) for d in directories])
        logger.info("Loaded word lists from %s", ", ".join(str(d) for d in directories))
    else:
        complexity = words_config.get("complexity", 0)
        if complexity not in range(len(SIZES)):
            raise ValueError(f"Complexity must be 0, 1 or 2, not {complexity!r}")
        petnames = Petnames.builtin(SIZES[complexity])
        logger.info("Using built-in %s word lists", SIZES[complexity])

    letters = words_config.get("letters") or 0
    if letters < 0:
        raise ValueError(f"Letters must be 0 or more, not {letters}")
    if letters > 0:
        petnames.retain(lambda word: len(word) <= letters)
    return petnames


def build_generator(config: dict) -> Generator:
    """Build the generator described by config.

    Raises ValueError if the configuration can produce no names at all.
    """
    words = config["generation"]["words"]
    if words < 0:
        raise ValueError(f"Number of words must be 0 or more, not {words}")

    petnames = load_petnames(config.get("words", {}))
    alliteration = config.get("alliteration", {})
    letter = alliteration.get("letter")

    if letter is not None:
        letter = str(letter)
        if len(letter) != 1:
            raise ValueError(f"Alliteration letter must be a single character, not {letter!r}")
        alliterations = Alliterations.from_petnames(petnames)
        alliterations.retain(lambda first_letter, _group: first_letter == letter)
        if alliterations.cardinality(words) == 0:
            raise ValueError(f"No petnames begin with the letter {letter!r}; try relaxing constraints")
        return alliterations

    if alliteration.get("enabled"):
        alliterations = Alliterations.from_petnames(petnames)
        alliterations.retain(lambda _first_letter, group: group.cardinality(words) > 0)
        if alliterations.cardinality(words) == 0:
            raise ValueError("No letter is shared by enough words to alliterate; try relaxing constraints")
        logger.info("Alliterating over %d letters", len(alliterations))
        return alliterations

    if petnames.cardinality(words) == 0:
        raise ValueError("No petnames to choose from; try relaxing constraints")
    return petnames


def generate_names(generator: Generator, rng: random.Random, generation: dict) -> Iterator[str]:
    """The names to print, according to the generation config."""
    words = generation["words"]
    separator = generation["separator"]

    if generation.get("non_repeating"):
        names = generator.iter_non_repeating(rng, words, separator)
    else:
        names = generator.iter(rng, words, separator)

    if generation.get("stream"):
        return names
    return islice(names, generation.get("count") or 0)


def write_names(names: Iterable[str], out: TextIO) -> None:
    for name in names:
        out.write(f"{name}\n")
    out.flush()


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.INFO)

    config_path = args.config or DEFAULT_CONFIG
    try:
        config = load_config(DEFAULT_CONFIG)
        if args.config:
            # Settings missing from a custom config fall back to the defaults
            config = _deep_merge(config, load_config(args.config))
        config = _apply_overrides(config, args)
    except (OSError, yaml.YAMLError) as exc:
        logger.error("Could not load config %s: %s", config_path, exc)
        sys.exit(1)

    try:
        generator = build_generator(config)
    except (OSError, ValueError) as exc:
        logger.error("%s", exc)
        sys.exit(1)

    seed = config["generation"].get("seed")
    rng = random.Random(seed) if seed is not None else random.Random()
    names = generate_names(generator, rng, config["generation"])

    try:
        write_names(names, sys.stdout)
    except BrokenPipeError:
        # Reader went away (e.g. `petname --stream | head`); stop quietly.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(0)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
