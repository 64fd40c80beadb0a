from dataclasses import dataclass
import logging, os
from dotenv import load_dotenv
load_dotenv()

# Pipeline paths are fixed; only the log level comes from the environment.
LEXICON_PATH = "socialsent.csv"
DEFAULT_TARGET = "review.txt"

@dataclass
class Settings:
    lexicon_path: str
    default_target: str
    log_level: int

def _to_level(x):
    lvl = logging.getLevelName((x or "").strip().upper())
    return lvl if isinstance(lvl, int) else logging.WARNING

SETTINGS = Settings(
    lexicon_path=LEXICON_PATH,
    default_target=DEFAULT_TARGET,
    log_level=_to_level(os.getenv("REVIEW_STARS_LOG_LEVEL", "WARNING")),
)
