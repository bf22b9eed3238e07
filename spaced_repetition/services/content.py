from django.conf import settings
from django.utils.module_loading import import_string

from ..errors import NotFound


def accept_all(card_id, deck_id):
    """Default content check: ids are trusted once validated upstream."""
    return True


def get_content_validator():
    path = getattr(settings, "SCHEDULER_CONTENT_VALIDATOR", None)
    if not path:
        return accept_all
    return import_string(path)


def ensure_card_exists(card_id, deck_id):
    if not get_content_validator()(card_id, deck_id):
        raise NotFound(f"card {card_id!r} does not exist in deck {deck_id!r}")
