from typing import List, Tuple

# (lower bound inclusive, stars); anything below the first bound is 1 star
STAR_THRESHOLDS: List[Tuple[float, int]] = [(-5.0, 2), (-1.0, 3), (1.0, 4), (5.0, 5)]
MIN_STARS = 1
NEUTRAL_STARS = 3

def star_rating(total: float) -> int:
    if total != total:  # NaN
        return NEUTRAL_STARS
    stars = MIN_STARS
    for lower, s in STAR_THRESHOLDS:
        if total >= lower:
            stars = s
    return stars
