"""Coordinates load → score → rate. Keeps the CLI thin and the pipeline easy to test."""

from typing import Tuple

from .config import SETTINGS
from .lexicon_model import read_lexicon_file
from .model import score_file_detail, ScoreResult
from .policy import star_rating

def rate_file(path: str, lexicon_path: str = SETTINGS.lexicon_path) -> Tuple[ScoreResult, int]:
    lex = read_lexicon_file(lexicon_path)
    res = score_file_detail(path, lex)
    return res, star_rating(res.total)
