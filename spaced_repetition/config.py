DEFAULT_EASINESS_FACTOR = 2.5
MIN_EASINESS_FACTOR = 1.3

MIN_QUALITY = 0
MAX_QUALITY = 5
PASSING_QUALITY = 3    # quality >= 3 counts as a correct recall

FAILED_INTERVAL_DAYS = 1   # review again tomorrow
FIRST_INTERVAL_DAYS = 1
SECOND_INTERVAL_DAYS = 6

# Shared by the grader (is_mastered) and the summary aggregator
MASTERY_THRESHOLD = 3

DEFAULT_DUE_LIMIT = 20
MAX_DUE_LIMIT = 100

WRITE_RETRY_ATTEMPTS = 3
