"""Error taxonomy raised by the scheduling engine.

Each error carries the HTTP status and machine-readable code the API layer
reports, and whether the caller may safely retry.
"""


class SchedulerError(Exception):
    status_code = 500
    code = "scheduler_error"
    retryable = False
    default_message = "Scheduler error"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class InvalidArgument(SchedulerError):
    status_code = 400
    code = "invalid_argument"
    default_message = "Invalid argument"


class NotFound(SchedulerError):
    status_code = 404
    code = "not_found"
    default_message = "Card not found"


class Conflict(SchedulerError):
    status_code = 409
    code = "conflict"
    retryable = True
    default_message = "Concurrent update on the same card, retry the request"


class Unavailable(SchedulerError):
    status_code = 503
    code = "unavailable"
    retryable = True
    default_message = "Review store unavailable"
