# Django discovers models from <app>.models; the definitions live in data/
from .data.models import ReviewCard, ReviewLog  # noqa: F401
