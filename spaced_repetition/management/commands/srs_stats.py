import json
from dataclasses import asdict

from django.core.management.base import BaseCommand, CommandError

from spaced_repetition.errors import SchedulerError
from spaced_repetition.services.summary import get_deck_stats, get_summary


class Command(BaseCommand):
    help = "Print a user's spaced-repetition summary as JSON"

    def add_arguments(self, parser):
        parser.add_argument("user_id", help="User whose cards to summarize")
        parser.add_argument(
            "--deck-stats", action="store_true", help="Include per-deck breakdown"
        )

    def handle(self, *args, **options):
        user_id = options["user_id"]
        try:
            summary = get_summary(user_id)
            payload = {**asdict(summary), "has_cards": summary.has_cards}
            if options["deck_stats"]:
                payload["decks"] = [asdict(d) for d in get_deck_stats(user_id)]
        except SchedulerError as e:
            raise CommandError(f"Error computing summary: {e}") from e

        self.stdout.write(json.dumps(payload, indent=2))
