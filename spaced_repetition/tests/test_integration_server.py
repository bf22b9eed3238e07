import os
import pytest
import requests
import uuid
import logging

BASE_URL = os.environ.get("SRS_BASE_URL", "http://127.0.0.1:8000")
logger = logging.getLogger(__name__)


def headers(user_id):
    return {"X-User-ID": user_id}


def post_review(user_id, card_id, quality, idem=None, deck_id="deck-live"):
    """Helper for POST /api/flashcards/review"""
    payload = {"card_id": card_id, "deck_id": deck_id, "quality": quality}
    if idem:
        payload["idempotency_key"] = idem
    r = requests.post(f"{BASE_URL}/api/flashcards/review", json=payload, headers=headers(user_id))
    data = r.json()
    logger.info(
        "POST /review quality=%s → status=%s interval=%s idempotent=%s",
        quality,
        r.status_code,
        data.get("interval_days"),
        data.get("idempotent"),
    )
    return r


def get_due(user_id, **params):
    """Helper for GET /api/flashcards/due"""
    r = requests.get(f"{BASE_URL}/api/flashcards/due", params=params, headers=headers(user_id))
    logger.info("GET /due → status=%s total_due=%s", r.status_code, r.json().get("total_due"))
    return r


def new_id(prefix):
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


@pytest.mark.integration
def test_review_sequence_live():
    """4, 4, 5 then a failure resets the streak"""
    user_id, card_id = new_id("user"), new_id("card")

    intervals = [post_review(user_id, card_id, q).json()["interval_days"] for q in (4, 4, 5)]
    assert intervals[:2] == [1, 6]
    assert intervals[2] > 6

    failed = post_review(user_id, card_id, 1).json()
    assert failed["repetition"] == 0
    assert failed["interval_days"] == 1
    assert failed["correct_count"] + failed["incorrect_count"] == failed["total_reviews"] == 4
    logger.info("✓ Passed: sequence intervals %s then reset", intervals)


@pytest.mark.integration
def test_idempotency_live():
    """Identical requests should reuse result with 200 + idempotent=True"""
    user_id, card_id = new_id("user"), new_id("card")

    first = post_review(user_id, card_id, 4, "idem-live-same")
    assert first.status_code == 201
    assert first.json()["idempotent"] is False

    second = post_review(user_id, card_id, 4, "idem-live-same")
    d2 = second.json()
    assert second.status_code == 200
    assert d2["idempotent"] is True
    assert d2["total_reviews"] == 1
    logger.info("✓ Passed: idempotency verified (201 then 200)")


@pytest.mark.integration
def test_invalid_quality_live():
    r = post_review(new_id("user"), new_id("card"), 7)
    assert r.status_code == 400
    assert r.json()["error"]["code"] == "invalid_argument"


@pytest.mark.integration
def test_just_reviewed_card_not_due_live():
    user_id = new_id("user")
    post_review(user_id, new_id("card"), 0)

    r = get_due(user_id)
    assert r.status_code == 200
    assert r.json()["has_due_cards"] is False


@pytest.mark.integration
def test_summary_live():
    user_id = new_id("user")
    post_review(user_id, new_id("card"), 4)

    r = requests.get(f"{BASE_URL}/api/flashcards/stats/summary", headers=headers(user_id))
    data = r.json()
    assert data["total_cards"] == 1
    assert data["learning"] == 1
    assert data["has_cards"] is True
