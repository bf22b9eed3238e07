from rest_framework import views, status
from rest_framework.response import Response
import structlog
import uuid
from ..domain.enums import QUALITY_LABELS
from ..services.due import get_due_cards
from ..services.reviews import apply_review
from ..services.summary import get_deck_stats, get_summary
from ..utils.time import to_utc_iso
from .serializers import DueQuerySerializer, ReviewCardSerializer, ReviewInSerializer

base_logger = structlog.get_logger()


def bind_request_logger(request):
    # Create a unique request_id
    request_id = str(uuid.uuid4())
    return base_logger.bind(request_id=request_id, user_id=request.user_id)


class ReviewView(views.APIView):
    def post(self, request):
        logger = bind_request_logger(request)

        s = ReviewInSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = s.validated_data

        outcome = apply_review(
            request.user_id,
            data["card_id"],
            data["deck_id"],
            data["quality"],
            idempotency_key=data.get("idempotency_key"),
        )
        card = outcome.card
        status_code = status.HTTP_200_OK if outcome.replayed else status.HTTP_201_CREATED

        logger.info(
            "review_api_response",
            card_id=card.card_id,
            deck_id=card.deck_id,
            quality=outcome.quality,
            idempotent=outcome.replayed,
            interval_days=card.interval,
            next_review_utc=to_utc_iso(card.next_review),
            status=status_code,
        )

        return Response(
            {
                "card_id": card.card_id,
                "deck_id": card.deck_id,
                "quality": outcome.quality,
                "quality_label": QUALITY_LABELS[outcome.quality],
                "is_correct": outcome.is_correct,
                "easiness_factor": card.easiness_factor,
                "interval_days": card.interval,
                "repetition": card.repetition,
                "last_review": to_utc_iso(card.last_review),
                "next_review": to_utc_iso(card.next_review),
                "total_reviews": card.total_reviews,
                "correct_count": card.correct_count,
                "incorrect_count": card.incorrect_count,
                "idempotent": outcome.replayed,
            },
            status=status_code,
        )


class DueCardsView(views.APIView):
    def get(self, request):
        logger = bind_request_logger(request)

        qs = DueQuerySerializer(data=request.query_params)
        qs.is_valid(raise_exception=True)
        deck_id = qs.validated_data.get("deck_id")

        due = get_due_cards(request.user_id, deck_id=deck_id, limit=qs.validated_data["limit"])

        logger.info(
            "due_cards_api_response",
            deck_id=deck_id,
            total_due=due.total_due,
            card_count=len(due.cards),
        )

        return Response(
            {
                "due_cards": ReviewCardSerializer(due.cards, many=True).data,
                "total_due": due.total_due,
                "has_due_cards": due.has_due_cards,
            }
        )


class SummaryView(views.APIView):
    def get(self, request):
        summary = get_summary(request.user_id)
        return Response(
            {
                "total_cards": summary.total_cards,
                "due_today": summary.due_today,
                "mastered": summary.mastered,
                "learning": summary.learning,
                "has_cards": summary.has_cards,
            }
        )


class DeckStatsView(views.APIView):
    def get(self, request):
        decks = get_deck_stats(request.user_id)
        return Response(
            {
                "decks": [
                    {
                        "deck_id": d.deck_id,
                        "total_cards": d.total_cards,
                        "cards_reviewed": d.cards_reviewed,
                        "cards_due": d.cards_due,
                        "mastered": d.mastered,
                    }
                    for d in decks
                ]
            }
        )
