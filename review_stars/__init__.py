"""Lexicon-based review scoring: sum word sentiment, map the total to 1-5 stars."""

from .lexicon_model import Lexicon, read_lexicon_file
from .model import ScoreResult, score_file, score_file_detail
from .policy import star_rating

__all__ = ["Lexicon", "read_lexicon_file", "ScoreResult", "score_file", "score_file_detail", "star_rating"]
