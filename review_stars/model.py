import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from .errors import TargetOpenError, TargetReadError
from .lexicon_model import Lexicon
from .normalize import iter_tokens

log = logging.getLogger(__name__)

LEGEND = "[word: current_score, accumulated score]"

@dataclass
class ScoreResult:
    total: float = 0.0
    # (word, score, running total) for every matched token, in file order
    matches: List[Tuple[str, float, float]] = field(default_factory=list)

def score_file_detail(path: str, lex: Lexicon) -> ScoreResult:
    """
    Scan ``path`` word by word and sum the lexicon score of every token found.
    Prints one ``word: score, running_total`` line per hit, then the summary.
    Raises TargetOpenError / TargetReadError; no partial total on failure.
    """
    try:
        f = open(path, "r", encoding="utf-8")
    except OSError as e:
        raise TargetOpenError(f"Error opening file: {e}") from e

    res = ScoreResult()
    print(LEGEND)
    with f:
        try:
            for tok in iter_tokens(f):
                score = lex.lookup(tok)
                if score is None:
                    continue
                res.total += score
                res.matches.append((tok, score, res.total))
                print(f"{tok}: {score:.2f}, {res.total:.2f}")
        except (OSError, UnicodeDecodeError) as e:
            raise TargetReadError(f"Error reading file: {e}") from e

    print(f"\n{path} score: {res.total:.2f}")
    log.debug("%s: %d matched tokens, total %.4f", path, len(res.matches), res.total)
    return res

def score_file(path: str, lex: Lexicon) -> float:
    return score_file_detail(path, lex).total
