from django.db import models
from django.utils import timezone

from ..config import DEFAULT_EASINESS_FACTOR


class ReviewCard(models.Model):
    user_id = models.CharField(max_length=64)
    card_id = models.CharField(max_length=64)
    deck_id = models.CharField(max_length=64)
    easiness_factor = models.FloatField(default=DEFAULT_EASINESS_FACTOR)
    interval = models.PositiveIntegerField(default=0)  # days
    repetition = models.PositiveIntegerField(default=0)
    last_review = models.DateTimeField(null=True, blank=True)  # UTC
    next_review = models.DateTimeField(null=True, blank=True)  # null until first review
    total_reviews = models.PositiveIntegerField(default=0)
    correct_count = models.PositiveIntegerField(default=0)
    incorrect_count = models.PositiveIntegerField(default=0)
    version = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        unique_together = (("user_id", "card_id", "deck_id"),)
        indexes = [
            models.Index(fields=["user_id", "next_review"], name="review_card_user_next_idx"),
            models.Index(fields=["user_id", "deck_id", "next_review"], name="review_card_user_deck_next_idx"),
        ]

    def __str__(self):
        return f"{self.user_id}:{self.deck_id}:{self.card_id}"


class ReviewLog(models.Model):
    user_id = models.CharField(max_length=64)
    card_id = models.CharField(max_length=64)
    deck_id = models.CharField(max_length=64)
    quality = models.SmallIntegerField()
    is_correct = models.BooleanField()
    idempotency_key = models.CharField(max_length=64, null=True, blank=True)
    easiness_factor = models.FloatField()
    interval = models.PositiveIntegerField()
    repetition = models.PositiveIntegerField()
    next_review = models.DateTimeField()
    reviewed_at = models.DateTimeField(default=timezone.now)

    class Meta:
        # NULL keys never collide, so keyless reviews are unconstrained
        unique_together = (("user_id", "card_id", "deck_id", "idempotency_key"),)
        indexes = [
            models.Index(fields=["user_id", "card_id", "reviewed_at"], name="review_log_user_card_at_idx"),
        ]
