from dataclasses import dataclass

import structlog
from django.db import DatabaseError, IntegrityError, OperationalError, transaction

from ..config import WRITE_RETRY_ATTEMPTS
from ..data import repos
from ..data.models import ReviewCard
from ..domain.logic import grade, next_review_at
from ..domain.validation import validate_identifier, validate_quality
from ..errors import Conflict, Unavailable
from ..utils import time
from .content import ensure_card_exists

logger = structlog.get_logger()


@dataclass
class ReviewOutcome:
    card: ReviewCard
    quality: int
    is_correct: bool
    replayed: bool = False


class _StaleCard(Exception):
    """The row changed between read and conditional write."""


def _replay(existing, user_id, card_id, deck_id):
    card = repos.get_card(user_id, card_id, deck_id)
    logger.info("idempotent_reuse",
        user_id=user_id,
        card_id=card_id,
        deck_id=deck_id,
        idempotency_key=existing.idempotency_key,
        next_review_utc=time.to_utc_iso(existing.next_review),
    )
    return ReviewOutcome(card, existing.quality, existing.is_correct, replayed=True)


def _grade_once(user_id, card_id, deck_id, quality, idempotency_key, now):
    with transaction.atomic():
        # Serialize updates per (user, card, deck)
        card = repos.get_card_for_update(user_id, card_id, deck_id)
        if card is None:
            ensure_card_exists(card_id, deck_id)
            card = repos.create_card(user_id, card_id, deck_id, now)

        result = grade(quality, card.easiness_factor, card.interval, card.repetition)
        next_dt = next_review_at(now, result.interval)

        if not repos.save_graded(card, result, now, next_dt):
            raise _StaleCard()

        repos.persist_review_log(card, quality, result.is_correct, idempotency_key, now)
    return card, result


def apply_review(user_id, card_id, deck_id, quality, idempotency_key=None, now=None):
    """Grade one review of a card and persist the new schedule atomically.

    A review repeated with an ``idempotency_key`` already recorded for the
    same card returns the stored outcome instead of grading twice.

    Raises:
        InvalidArgument: malformed ids or quality outside 0-5, before any write.
        NotFound: no record exists and the content check rejects the card.
        Conflict: the record stayed contended after the bounded retries.
        Unavailable: the store failed.
    """
    validate_identifier("user_id", user_id)
    validate_identifier("card_id", card_id)
    validate_identifier("deck_id", deck_id)
    quality = validate_quality(quality)
    if idempotency_key is not None:
        validate_identifier("idempotency_key", idempotency_key)
    now = now or time.now()

    logger.info("review_received",
        user_id=user_id,
        card_id=card_id,
        deck_id=deck_id,
        quality=quality,
        idempotency_key=idempotency_key,
    )

    last_error = None
    for attempt in range(1, WRITE_RETRY_ATTEMPTS + 1):
        try:
            # Fast path: return previous result if same idempotency_key
            existing = repos.get_existing_idempotent(user_id, card_id, deck_id, idempotency_key)
            if existing:
                return _replay(existing, user_id, card_id, deck_id)

            card, result = _grade_once(user_id, card_id, deck_id, quality, idempotency_key, now)
        except (_StaleCard, IntegrityError, OperationalError) as exc:
            last_error = exc
            logger.warning("review_write_contention",
                user_id=user_id,
                card_id=card_id,
                deck_id=deck_id,
                attempt=attempt,
                error=type(exc).__name__,
            )
            continue
        except DatabaseError as exc:
            logger.error("review_store_failure",
                user_id=user_id,
                card_id=card_id,
                deck_id=deck_id,
                error=str(exc),
            )
            raise Unavailable() from exc

        logger.info("review_scheduled",
            user_id=user_id,
            card_id=card_id,
            deck_id=deck_id,
            quality=quality,
            is_correct=result.is_correct,
            easiness_factor=card.easiness_factor,
            interval_days=card.interval,
            repetition=card.repetition,
            next_review_utc=time.to_utc_iso(card.next_review),
        )
        return ReviewOutcome(card, quality, result.is_correct)

    logger.error("review_retries_exhausted",
        user_id=user_id,
        card_id=card_id,
        deck_id=deck_id,
        attempts=WRITE_RETRY_ATTEMPTS,
    )
    if isinstance(last_error, OperationalError):
        raise Unavailable() from last_error
    raise Conflict() from last_error
