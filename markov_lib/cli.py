import argparse
import logging
import sys

from pydantic import ValidationError

from .config import ChainConfig
from .errors import MarkovError
from .model import get_model

logger = logging.getLogger("markov_lib")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print a random question and a random exclamation built from Frankenstein"
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random source (default: current time)")
    parser.add_argument("--corpus", default=None, help="Read the source text from this file instead of the bundled one")
    parser.add_argument("--max-attempts", type=int, default=10000, help="Generation attempts per sentence before giving up")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = ChainConfig(seed=args.seed, max_attempts=args.max_attempts)
        model = get_model(args.corpus, config=config)
        question = model.generate_sentence("?")
        exclamation = model.generate_sentence("!")
    except (MarkovError, OSError, ValidationError) as e:
        logger.error("%s", e)
        return 1

    print(question)
    print()
    print(exclamation)
    return 0


if __name__ == "__main__":
    sys.exit(main())
