from datetime import datetime, timedelta, timezone
from itertools import product

import pytest

from spaced_repetition.config import DEFAULT_EASINESS_FACTOR, MASTERY_THRESHOLD, MIN_EASINESS_FACTOR
from spaced_repetition.domain.enums import QUALITY_LABELS, Quality
from spaced_repetition.domain.logic import grade, is_mastered, next_easiness_factor, next_review_at
from spaced_repetition.errors import InvalidArgument


def test_first_review_correct():
    """First correct answer: interval=1, repetition=1."""
    result = grade(4, DEFAULT_EASINESS_FACTOR, 0, 0)
    assert result.interval == 1
    assert result.repetition == 1
    assert result.easiness_factor == 2.5
    assert result.is_correct is True


def test_second_review_correct():
    """Second correct answer: interval=6."""
    result = grade(4, 2.5, 1, 1)
    assert result.interval == 6
    assert result.repetition == 2


def test_third_review_uses_new_easiness_factor():
    """Third+ correct: interval = old_interval * new easiness factor."""
    result = grade(5, 2.5, 6, 2)
    assert result.easiness_factor == 2.6
    assert result.interval == 16  # round(6 * 2.6), not round(6 * 2.5)
    assert result.repetition == 3


def test_full_review_sequence():
    ef, interval, rep = DEFAULT_EASINESS_FACTOR, 0, 0

    r1 = grade(Quality.GOOD, ef, interval, rep)
    assert (r1.repetition, r1.interval) == (1, 1)
    assert r1.easiness_factor == pytest.approx(2.5)

    r2 = grade(Quality.GOOD, r1.easiness_factor, r1.interval, r1.repetition)
    assert (r2.repetition, r2.interval) == (2, 6)

    r3 = grade(Quality.EASY, r2.easiness_factor, r2.interval, r2.repetition)
    assert r3.repetition == 3
    assert r3.interval == round(6 * r3.easiness_factor)

    r4 = grade(Quality.HARD_FORGOT, r3.easiness_factor, r3.interval, r3.repetition)
    assert (r4.repetition, r4.interval) == (0, 1)
    assert r4.is_correct is False


@pytest.mark.parametrize("quality", [0, 1, 2])
@pytest.mark.parametrize("repetition,interval", [(0, 0), (2, 6), (7, 180)])
def test_failure_resets(quality, repetition, interval):
    """Quality < 3 resets repetition and interval whatever came before."""
    result = grade(quality, 2.2, interval, repetition)
    assert result.repetition == 0
    assert result.interval == 1
    assert result.is_correct is False


def test_easiness_factor_floor_over_all_short_sequences():
    for qualities in product(range(6), repeat=4):
        ef, interval, rep = DEFAULT_EASINESS_FACTOR, 0, 0
        for q in qualities:
            result = grade(q, ef, interval, rep)
            ef, interval, rep = result.easiness_factor, result.interval, result.repetition
            assert ef >= MIN_EASINESS_FACTOR
            assert interval >= 1


def test_easiness_factor_floor_at_minimum():
    assert next_easiness_factor(MIN_EASINESS_FACTOR, 0) == MIN_EASINESS_FACTOR


def test_easy_increases_easiness():
    assert grade(5, 2.5, 6, 2).easiness_factor > 2.5


def test_interval_never_zero_with_floor_factor():
    result = grade(3, MIN_EASINESS_FACTOR, 1, 2)
    assert result.interval >= 1


@pytest.mark.parametrize("quality", [-1, 6, 100, 2.5, "4", None, True])
def test_invalid_quality_rejected(quality):
    with pytest.raises(InvalidArgument):
        grade(quality, 2.5, 0, 0)


def test_next_review_is_interval_days_after_review():
    reviewed = datetime(2026, 3, 10, 12, 0, tzinfo=timezone.utc)
    assert next_review_at(reviewed, 6) == reviewed + timedelta(days=6)


def test_mastery_follows_threshold():
    assert not is_mastered(MASTERY_THRESHOLD - 1)
    assert is_mastered(MASTERY_THRESHOLD)


def test_consecutive_passes_reach_mastery():
    ef, interval, rep = DEFAULT_EASINESS_FACTOR, 0, 0
    for _ in range(MASTERY_THRESHOLD):
        result = grade(Quality.GOOD, ef, interval, rep)
        ef, interval, rep = result.easiness_factor, result.interval, result.repetition
    assert is_mastered(rep)


def test_quality_labels_cover_every_rating():
    assert set(QUALITY_LABELS) == set(Quality)
    assert QUALITY_LABELS[Quality.FORGOT] == "Again"
    assert QUALITY_LABELS[Quality.EASY] == "Easy"
