from django.conf import settings
from django.db.models import Count, F, Q

from ..config import MASTERY_THRESHOLD
from .models import ReviewCard, ReviewLog


def read_alias():
    """Database alias for read-only queries; may point at a lagging replica."""
    return getattr(settings, "SCHEDULER_READ_DATABASE", "default")


def get_card(user_id, card_id, deck_id):
    return ReviewCard.objects.filter(
        user_id=user_id, card_id=card_id, deck_id=deck_id
    ).first()


def get_card_for_update(user_id, card_id, deck_id):
    """
    Fetch the scheduling row and lock it until the surrounding transaction ends.
    Must be called inside transaction.atomic(). Returns None if missing.
    """
    return (ReviewCard.objects
            .select_for_update()
            .filter(user_id=user_id, card_id=card_id, deck_id=deck_id)
            .first())


def create_card(user_id, card_id, deck_id, now):
    """
    Insert a default record. A concurrent insert for the same key raises
    IntegrityError, which the caller treats as contention.
    """
    return ReviewCard.objects.create(
        user_id=user_id, card_id=card_id, deck_id=deck_id,
        created_at=now, updated_at=now,
    )


def save_graded(card, result, reviewed_at, next_review):
    """
    Write a grading outcome only if nobody else wrote the row since it was read.
    Returns False on a version mismatch, leaving the row untouched.
    """
    updated = (ReviewCard.objects
               .filter(pk=card.pk, version=card.version)
               .update(
                   easiness_factor=result.easiness_factor,
                   interval=result.interval,
                   repetition=result.repetition,
                   last_review=reviewed_at,
                   next_review=next_review,
                   total_reviews=F("total_reviews") + 1,
                   correct_count=F("correct_count") + (1 if result.is_correct else 0),
                   incorrect_count=F("incorrect_count") + (0 if result.is_correct else 1),
                   version=F("version") + 1,
                   updated_at=reviewed_at,
               ))
    if updated:
        card.refresh_from_db()
    return bool(updated)


def get_existing_idempotent(user_id, card_id, deck_id, idem_key):
    if not idem_key:
        return None
    return ReviewLog.objects.filter(
        user_id=user_id, card_id=card_id, deck_id=deck_id, idempotency_key=idem_key
    ).first()


def persist_review_log(card, quality, is_correct, idem_key, reviewed_at):
    return ReviewLog.objects.create(
        user_id=card.user_id, card_id=card.card_id, deck_id=card.deck_id,
        quality=quality, is_correct=is_correct, idempotency_key=idem_key or None,
        easiness_factor=card.easiness_factor, interval=card.interval,
        repetition=card.repetition, next_review=card.next_review,
        reviewed_at=reviewed_at,
    )


def due_cards(user_id, until, deck_id=None):
    """Cards with next_review <= until, most overdue first. Unreviewed cards never match."""
    qs = ReviewCard.objects.using(read_alias()).filter(
        user_id=user_id, next_review__isnull=False, next_review__lte=until
    )
    if deck_id is not None:
        qs = qs.filter(deck_id=deck_id)
    return qs.order_by("next_review", "card_id")


def summary_counts(user_id, due_until):
    return ReviewCard.objects.using(read_alias()).filter(user_id=user_id).aggregate(
        total_cards=Count("pk"),
        due_today=Count("pk", filter=Q(next_review__isnull=False, next_review__lte=due_until)),
        mastered=Count("pk", filter=Q(repetition__gte=MASTERY_THRESHOLD)),
        learning=Count("pk", filter=Q(total_reviews__gte=1, repetition__lt=MASTERY_THRESHOLD)),
    )


def deck_counts(user_id, due_until):
    return (ReviewCard.objects.using(read_alias())
            .filter(user_id=user_id)
            .values("deck_id")
            .annotate(
                total_cards=Count("pk"),
                cards_reviewed=Count("pk", filter=Q(total_reviews__gte=1)),
                cards_due=Count("pk", filter=Q(next_review__isnull=False, next_review__lte=due_until)),
                mastered=Count("pk", filter=Q(repetition__gte=MASTERY_THRESHOLD)),
            )
            .order_by("deck_id"))
