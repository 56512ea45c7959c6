"""
Assistant Views

API endpoints for the website chat widget.
"""

import logging

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny
from rest_framework import status

from core.exceptions import ValidationError
from .serializers import ChatRequestSerializer
from .services.reply_composer import ReplyComposer, price_label
from .services.session_registry import get_session_registry

logger = logging.getLogger(__name__)


class ChatView(APIView):
    """
    Answer one chat message.

    POST /api/v1/assistant/chat/

    Body:
        message     - The user's question (required, 2-300 chars)
        session_id  - Id returned by a previous call (optional; omitted or
                      unknown ids start a new conversation)

    Response:
        session_id   - Id to send with the next message
        reply        - Conversational text (+ highlighted answer)
        contact_url  - WhatsApp link when a hand-off is suggested
        result       - The structured search result
    """
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = ChatRequestSerializer(data=request.data)
        if not serializer.is_valid():
            field, messages = next(iter(serializer.errors.items()))
            raise ValidationError(str(messages[0]), field=field)

        message = serializer.validated_data["message"]
        registry = get_session_registry()
        session_id, engine = registry.get_or_create(serializer.validated_data.get("session_id"))

        result = engine.search(message)
        logger.info(f"Chat [{session_id}] intent={result.intent} confidence={result.confidence} results={len(result.results)}")
        reply = ReplyComposer(registry.settings.whatsapp_number).compose(message, result)

        data = result.to_dict()
        for item in data["results"]:
            item["price_label"] = price_label(item.get("price_numeric"))

        return Response({
            "session_id": session_id,
            "reply": reply.to_dict(),
            "contact_url": reply.contact_url,
            "result": data,
        })


class SessionView(APIView):
    """
    Forget a conversation.

    DELETE /api/v1/assistant/sessions/<session_id>/
    """
    permission_classes = [AllowAny]

    def delete(self, request, session_id):
        get_session_registry().drop(session_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class HealthView(APIView):
    """
    Health check for load balancers.

    GET /api/v1/assistant/health/
    """
    permission_classes = [AllowAny]
    throttle_classes = []

    def get(self, request):
        registry = get_session_registry()
        return Response({
            "status": "healthy",
            "service": "albait-assistant",
            "catalog_items": len(registry.catalog),
            "active_sessions": len(registry),
        })
