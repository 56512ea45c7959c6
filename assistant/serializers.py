"""
Assistant Serializers

Validates chat requests for the assistant API.
"""

from rest_framework import serializers

from .query_sanitizer import (
    MAX_SESSION_ID_LENGTH,
    sanitize_message,
    validate_message,
    is_valid_session_id,
)


class ChatRequestSerializer(serializers.Serializer):
    """Incoming chat message."""
    message = serializers.CharField(trim_whitespace=True, allow_blank=True)
    session_id = serializers.CharField(required=False, allow_blank=True, max_length=MAX_SESSION_ID_LENGTH)

    def validate_message(self, value):
        message = sanitize_message(value)
        error = validate_message(message)
        if error:
            raise serializers.ValidationError(error)
        return message

    def validate_session_id(self, value):
        if value and not is_valid_session_id(value):
            raise serializers.ValidationError("session_id hanya boleh berisi huruf, angka, '-' dan '_'")
        return value or None
