"""
Command-line entry point.

Usage:
  review-stars [filename]      # defaults to review.txt
  python -m review_stars [filename]

Loads the lexicon from socialsent.csv, scores the file word by word and
prints a 1-5 star rating. Exit status is 1 on a usage error or when either
file cannot be read.
"""
import argparse, logging, sys
from typing import List, Optional

from .config import SETTINGS
from .errors import ReviewStarsError, UsageError
from .inference import rate_file

log = logging.getLogger(__name__)

def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="review-stars",
        description="Score a review against the social sentiment lexicon and rate it 1-5 stars.",
    )
    ap.add_argument("filename", nargs="*", help=f"Text file to rate (default: {SETTINGS.default_target})")
    return ap

def _positional_args(argv: Optional[List[str]]) -> List[str]:
    """Every argument except -h/--help; dash-prefixed names count as filenames."""
    args, extra = _build_parser().parse_known_args(argv)
    return list(args.filename) + extra

def resolve_filename(args: List[str]) -> str:
    if not args:
        return SETTINGS.default_target
    if len(args) == 1:
        return args[0]
    raise UsageError("Too many arguments")

def _usage_error(err: UsageError) -> int:
    print(f"Error: {err}")
    print(f"Usage: review-stars <filename>    (defaults to '{SETTINGS.default_target}')")
    return 1

def main(argv: Optional[List[str]] = None) -> int:
    args = _positional_args(argv)
    logging.basicConfig(level=SETTINGS.log_level, format="%(asctime)s %(levelname)s %(message)s")

    try:
        filename = resolve_filename(args)
    except UsageError as e:
        return _usage_error(e)

    try:
        _, stars = rate_file(filename, SETTINGS.lexicon_path)
    except ReviewStarsError as e:
        log.debug("Run failed", exc_info=True)
        print(f"Error: {e}")
        return 1

    print(f"{filename} Stars: {stars}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
