from dataclasses import dataclass, field
from typing import List

import structlog

from ..config import DEFAULT_DUE_LIMIT
from ..data import repos
from ..data.models import ReviewCard
from ..domain.validation import validate_identifier, validate_limit
from ..utils import time

logger = structlog.get_logger()


@dataclass
class DueCards:
    cards: List[ReviewCard] = field(default_factory=list)
    total_due: int = 0

    @property
    def has_due_cards(self) -> bool:
        return self.total_due > 0


def get_due_cards(user_id, deck_id=None, limit=DEFAULT_DUE_LIMIT, now=None) -> DueCards:
    """Cards due at ``now`` for a user, most overdue first, truncated to ``limit``.

    Cards that were never reviewed are not due; first exposure comes from the
    lesson flow.
    """
    validate_identifier("user_id", user_id)
    if deck_id is not None:
        validate_identifier("deck_id", deck_id)
    limit = validate_limit(limit)
    now = now or time.now()

    qs = repos.due_cards(user_id, now, deck_id=deck_id)
    total_due = qs.count()
    cards = list(qs[:limit])

    logger.info("due_cards_listed",
        user_id=user_id,
        deck_id=deck_id,
        now_utc=time.to_utc_iso(now),
        total_due=total_due,
        returned=len(cards),
    )
    return DueCards(cards=cards, total_due=total_due)
