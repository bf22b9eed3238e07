from rest_framework import serializers

from ..config import DEFAULT_DUE_LIMIT, MAX_DUE_LIMIT, MAX_QUALITY, MIN_QUALITY
from ..data.models import ReviewCard
from ..domain.validation import IDENTIFIER_RE


class ReviewInSerializer(serializers.Serializer):
    card_id = serializers.RegexField(IDENTIFIER_RE)
    deck_id = serializers.RegexField(IDENTIFIER_RE)
    quality = serializers.IntegerField(min_value=MIN_QUALITY, max_value=MAX_QUALITY)
    idempotency_key = serializers.RegexField(IDENTIFIER_RE, required=False)


class DueQuerySerializer(serializers.Serializer):
    deck_id = serializers.RegexField(IDENTIFIER_RE, required=False)
    limit = serializers.IntegerField(
        min_value=1, max_value=MAX_DUE_LIMIT, default=DEFAULT_DUE_LIMIT
    )


class ReviewCardSerializer(serializers.ModelSerializer):
    class Meta:
        model = ReviewCard
        fields = [
            "card_id",
            "deck_id",
            "easiness_factor",
            "interval",
            "repetition",
            "last_review",
            "next_review",
            "total_reviews",
            "correct_count",
            "incorrect_count",
        ]
