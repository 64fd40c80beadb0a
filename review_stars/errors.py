"""Exceptions raised by the pipeline. The CLI catches ReviewStarsError, prints it and exits 1."""


class ReviewStarsError(Exception):
    pass


class UsageError(ReviewStarsError):
    """Wrong number of command-line arguments."""


class LexiconError(ReviewStarsError):
    pass


class LexiconOpenError(LexiconError):
    pass


class LexiconReadError(LexiconError):
    """Header missing or a row could not be read (not a malformed row, those are skipped)."""


class TargetError(ReviewStarsError):
    pass


class TargetOpenError(TargetError):
    pass


class TargetReadError(TargetError):
    pass
