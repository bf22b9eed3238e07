from django.http import JsonResponse

from spaced_repetition.domain.validation import IDENTIFIER_RE

import structlog

logger = structlog.get_logger()

USER_HEADER = "X-User-ID"


# Identity is verified upstream by the identity provider; the gateway forwards
# the verified user id in a header.
class IdentityHeaderMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.user_id = None
        if request.path.startswith("/api"):
            user_id = request.headers.get(USER_HEADER)
            if not user_id:
                return JsonResponse({"error": "User not authenticated"}, status=401)
            if not IDENTIFIER_RE.match(user_id):
                logger.warning("identity_header_rejected", path=request.path)
                return JsonResponse({"error": "Malformed user id"}, status=401)
            request.user_id = user_id
        response = self.get_response(request)
        return response
