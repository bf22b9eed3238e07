from django.apps import AppConfig


class SpacedRepetitionConfig(AppConfig):
    name = "spaced_repetition"
    default_auto_field = "django.db.models.BigAutoField"
