import csv, logging
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .errors import LexiconOpenError, LexiconReadError

log = logging.getLogger(__name__)

class Lexicon:
    """Read-only word -> score table. Keys are stored exactly as given."""

    def __init__(self, weights: Mapping[str, float]):
        self.weights: Mapping[str, float] = MappingProxyType(dict(weights))

    def lookup(self, word: str) -> Optional[float]:
        """Score for ``word``, or None when the word is not in the lexicon."""
        return self.weights.get(word)

    def __contains__(self, word) -> bool:
        return word in self.weights

    def __len__(self) -> int:
        return len(self.weights)

    def __repr__(self) -> str:
        return f"Lexicon({len(self)} words)"

def _parse_rows(rdr) -> Dict[str, float]:
    weights: Dict[str, float] = {}
    skipped = 0
    for r in rdr:
        # blank lines come through as []
        if len(r) < 2:
            skipped += 1
            continue
        # float() would also take " 2.0" and "1_000"
        if r[1] != r[1].strip() or "_" in r[1]:
            skipped += 1
            continue
        try:
            score = float(r[1])
        except ValueError:
            skipped += 1
            continue
        weights[r[0]] = score
    log.debug("Parsed %d lexicon rows, skipped %d malformed.", len(weights), skipped)
    return weights

def read_lexicon_file(path: str) -> Lexicon:
    """
    Load a CSV lexicon (header row, then ``word,score`` rows).

    Rows with fewer than two fields or a non-numeric score are skipped.
    Later duplicates override earlier ones.
    Raises LexiconOpenError / LexiconReadError.
    """
    try:
        f = open(path, "r", encoding="utf-8", newline="")
    except OSError as e:
        raise LexiconOpenError(f"Error opening file: {e}") from e

    with f:
        rdr = csv.reader(f)
        try:
            next(rdr)
        except StopIteration:
            raise LexiconReadError(f"Error reading header: {path} is empty") from None
        except (csv.Error, OSError, UnicodeDecodeError) as e:
            raise LexiconReadError(f"Error reading header: {e}") from e

        try:
            weights = _parse_rows(rdr)
        except (csv.Error, OSError, UnicodeDecodeError) as e:
            raise LexiconReadError(f"Error reading record: {e}") from e

    log.info("Loaded %d lexicon entries from %s", len(weights), path)
    return Lexicon(weights)
