from django.urls import path
from .views import DeckStatsView, DueCardsView, ReviewView, SummaryView

urlpatterns = [
    path("flashcards/due", DueCardsView.as_view(), name="due-cards"),
    path("flashcards/review", ReviewView.as_view(), name="review"),
    path("flashcards/stats/summary", SummaryView.as_view(), name="summary"),
    path("flashcards/stats/decks", DeckStatsView.as_view(), name="deck-stats"),
]
