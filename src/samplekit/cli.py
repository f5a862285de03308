from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional

from . import __version__
from .config import get_config, load_config, set_config
from .engine import RandomEngine
from .exceptions import SampleKitError
from .files import read_text_file
from .fill import fill_unique, rfill
from .generators import BoundedIntGenerator, BoundedRealGenerator
from .names import random_full_name, random_name, random_surname
from .numeric import isprime
from .printing import print_items

logger = logging.getLogger(__name__)


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


def _engine(args: argparse.Namespace) -> Optional[RandomEngine]:
    # Without --seed the shared engine is used.
    return RandomEngine(args.seed) if args.seed is not None else None


def _fill(producer: Callable, count: int, unique: bool) -> List:
    out: List = []
    if unique:
        return fill_unique(out, count, producer)
    return rfill(out, count, producer)


def _cmd_ints(args: argparse.Namespace) -> int:
    gen = BoundedIntGenerator(args.min, args.max, _engine(args))
    print_items(_fill(gen, args.count, args.unique), sep=args.sep)
    return 0


def _cmd_reals(args: argparse.Namespace) -> int:
    gen = BoundedRealGenerator(args.min, args.max, _engine(args))
    print_items(_fill(gen, args.count, False), sep=args.sep)
    return 0


def _cmd_names(args: argparse.Namespace) -> int:
    engine = _engine(args)
    pick = random_name
    if args.surnames:
        pick = random_surname
    elif args.full:
        pick = random_full_name
    print_items(_fill(lambda: pick(engine), args.count, args.unique), sep=args.sep)
    return 0


def _cmd_primes(args: argparse.Namespace) -> int:
    print_items([n for n in range(args.max + 1) if isprime(n)], sep=args.sep)
    return 0


def _cmd_cat(args: argparse.Namespace) -> int:
    sys.stdout.write(read_text_file(args.path))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="samplekit",
        description="Generate random sample data for exercising containers and streams",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", default=None, help="YAML file overriding the default settings")
    parser.add_argument("--sep", default=None, help="Separator written after each item")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    sub = parser.add_subparsers(dest="command", required=True)

    def add_draw_options(p: argparse.ArgumentParser) -> None:
        p.add_argument("-n", "--count", type=int, default=10, help="Number of values (default: 10)")
        p.add_argument("--seed", type=int, default=None, help="Seed a private engine for reproducible output")

    p = sub.add_parser("ints", help="Random integers in [min, max]")
    p.add_argument("--min", type=int, required=True)
    p.add_argument("--max", type=int, required=True)
    p.add_argument("--unique", action="store_true", help="Distinct values, sorted")
    add_draw_options(p)
    p.set_defaults(func=_cmd_ints)

    p = sub.add_parser("reals", help="Random floats in [min, max)")
    p.add_argument("--min", type=float, required=True)
    p.add_argument("--max", type=float, required=True)
    add_draw_options(p)
    p.set_defaults(func=_cmd_reals)

    p = sub.add_parser("names", help="Random first names, surnames or full names")
    which = p.add_mutually_exclusive_group()
    which.add_argument("--surnames", action="store_true")
    which.add_argument("--full", action="store_true")
    p.add_argument("--unique", action="store_true", help="Distinct values, sorted")
    add_draw_options(p)
    p.set_defaults(func=_cmd_names)

    p = sub.add_parser("primes", help="Primes in [0, max]")
    p.add_argument("--max", type=int, required=True)
    p.set_defaults(func=_cmd_primes)

    p = sub.add_parser("cat", help="Print the content of a text file")
    p.add_argument("path")
    p.set_defaults(func=_cmd_cat)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        if args.config is not None:
            set_config(load_config(args.config))
        if args.sep is None:
            args.sep = get_config().separator
        return args.func(args)
    except (SampleKitError, ValueError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"samplekit: error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
