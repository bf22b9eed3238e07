from dataclasses import dataclass
from datetime import datetime, timedelta

from ..config import (
    FAILED_INTERVAL_DAYS,
    FIRST_INTERVAL_DAYS,
    MASTERY_THRESHOLD,
    MAX_QUALITY,
    MIN_EASINESS_FACTOR,
    PASSING_QUALITY,
    SECOND_INTERVAL_DAYS,
)
from .validation import validate_quality


@dataclass(frozen=True)
class GradeResult:
    easiness_factor: float
    interval: int
    repetition: int
    is_correct: bool


def next_easiness_factor(easiness_factor: float, quality: int) -> float:
    miss = MAX_QUALITY - quality
    updated = easiness_factor + (0.1 - miss * (0.08 + miss * 0.02))
    return round(max(updated, MIN_EASINESS_FACTOR), 2)


def grade(quality: int, easiness_factor: float, interval: int, repetition: int) -> GradeResult:
    """Apply one SM-2 review to a card's scheduling state.

    Args:
        quality: Rating 0-5 (0=complete blackout, 5=perfect recall).
        easiness_factor: Current easiness factor (minimum 1.3).
        interval: Current interval in days.
        repetition: Number of consecutive correct reviews.

    Returns:
        GradeResult with the new easiness factor, interval, repetition and
        whether the recall counted as correct.

    Raises:
        InvalidArgument: quality is not an integer in [0, 5].
    """
    quality = validate_quality(quality)
    new_ef = next_easiness_factor(easiness_factor, quality)

    if quality < PASSING_QUALITY:
        # Failure resets spacing regardless of prior interval
        return GradeResult(new_ef, FAILED_INTERVAL_DAYS, 0, False)

    new_repetition = repetition + 1
    if new_repetition == 1:
        new_interval = FIRST_INTERVAL_DAYS
    elif new_repetition == 2:
        new_interval = SECOND_INTERVAL_DAYS
    else:
        # Compounds on the new easiness factor
        new_interval = round(interval * new_ef)

    return GradeResult(new_ef, max(new_interval, 1), new_repetition, True)


def next_review_at(reviewed_at: datetime, interval_days: int) -> datetime:
    return reviewed_at + timedelta(days=interval_days)


def is_mastered(repetition: int) -> bool:
    return repetition >= MASTERY_THRESHOLD
