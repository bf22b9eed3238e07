from enum import IntEnum


class Quality(IntEnum):
    FORGOT = 0         # complete blackout
    HARD_FORGOT = 1    # incorrect but recognized
    BARELY_FORGOT = 2  # incorrect but felt close
    HARD = 3           # correct with significant difficulty
    GOOD = 4           # correct with some hesitation
    EASY = 5           # perfect recall


QUALITY_LABELS = {
    Quality.FORGOT: "Again",
    Quality.HARD_FORGOT: "Again",
    Quality.BARELY_FORGOT: "Again",
    Quality.HARD: "Hard",
    Quality.GOOD: "Good",
    Quality.EASY: "Easy",
}
