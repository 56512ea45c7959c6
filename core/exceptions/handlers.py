"""
DRF Exception Handler
=====================

Every error leaving the API has the same ``{error, message, detail}`` shape,
so the chat widget needs a single error path:

- ``AlbaitError`` subtypes render their own ``to_dict()``.
- DRF's exceptions (malformed JSON, wrong method, throttling) are reshaped:
  ``error`` is the exception's code, ``message`` its text, and throttling
  adds ``detail.retry_after``.
- Anything else is logged with the view name and left to Django (500).

Registered in ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``.
"""

import logging

from rest_framework.exceptions import APIException, Throttled
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.response import Response

from .base import AlbaitError

logger = logging.getLogger(__name__)

GENERIC_MESSAGE = "Permintaan tidak dapat diproses"


def _view_name(context) -> str:
    view = context.get("view")
    return type(view).__name__ if view is not None else "unknown"


def _message(detail) -> str:
    """First human-readable message inside a DRF error detail."""
    if isinstance(detail, str):
        return str(detail)
    if isinstance(detail, (list, tuple)) and detail:
        return _message(detail[0])
    if isinstance(detail, dict) and detail:
        return _message(next(iter(detail.values())))
    return GENERIC_MESSAGE


def albait_exception_handler(exc, context):
    """Render any API error as ``{error, message, detail}``."""
    view_name = _view_name(context)

    if isinstance(exc, AlbaitError):
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(f"{view_name} -> {exc.error_code}: {exc.message} {exc.details or ''}")
        return Response(exc.to_dict(), status=exc.status_code)

    response = drf_exception_handler(exc, context)

    if response is None:
        logger.exception(f"Unhandled exception in {view_name}")
        return None

    # Django's Http404 and PermissionDenied arrive unconverted
    if isinstance(exc, APIException):
        code, detail = exc.default_code, exc.detail
    else:
        detail = response.data.get("detail") if isinstance(response.data, dict) else response.data
        code = getattr(detail, "code", "error")

    body = {"error": code, "message": _message(detail)}
    if isinstance(exc, Throttled) and exc.wait is not None:
        body["detail"] = {"retry_after": int(exc.wait)}
    logger.info(f"{view_name} -> {code} ({response.status_code})")
    response.data = body

    return response
