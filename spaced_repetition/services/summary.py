from dataclasses import dataclass

import structlog

from ..data import repos
from ..domain.validation import validate_identifier
from ..utils import time

logger = structlog.get_logger()


@dataclass(frozen=True)
class Summary:
    total_cards: int
    due_today: int
    mastered: int
    learning: int

    @property
    def has_cards(self) -> bool:
        return self.total_cards > 0


@dataclass(frozen=True)
class DeckStats:
    deck_id: str
    total_cards: int
    cards_reviewed: int
    cards_due: int
    mastered: int


def get_summary(user_id, now=None) -> Summary:
    """Roll up a user's cards. Read-only; safe against a stale replica."""
    validate_identifier("user_id", user_id)
    now = now or time.now()

    counts = repos.summary_counts(user_id, time.end_of_day(now))
    summary = Summary(**counts)

    logger.info("summary_computed",
        user_id=user_id,
        total_cards=summary.total_cards,
        due_today=summary.due_today,
        mastered=summary.mastered,
        learning=summary.learning,
    )
    return summary


def get_deck_stats(user_id, now=None):
    validate_identifier("user_id", user_id)
    now = now or time.now()
    return [DeckStats(**row) for row in repos.deck_counts(user_id, now)]
