"""
Message Sanitization for the chat endpoint.

Strips markup and control characters, enforces length limits, and normalises
whitespace before a message reaches the search engine.
"""

import re
import html


# ── Limits ────────────────────────────────────────────────
MAX_MESSAGE_LENGTH = 300  # characters; chat questions are short
MIN_MESSAGE_LENGTH = 2
MAX_SESSION_ID_LENGTH = 64

_SESSION_ID = re.compile(r"^[A-Za-z0-9_-]+$")


def sanitize_message(raw: str) -> str:
    """
    Sanitise a chat message.

    1. Strip leading/trailing whitespace
    2. HTML-unescape (in case `&amp;` etc. sneak in from the widget)
    3. Remove HTML tags
    4. Remove control characters and null bytes
    5. Collapse multiple spaces
    6. Truncate to MAX_MESSAGE_LENGTH
    """
    if not raw:
        return ""

    q = raw.strip()

    # HTML unescape (&amp; → &, &#39; → ', etc.)
    q = html.unescape(q)

    # Strip any HTML tags
    q = re.sub(r"<[^>]+>", "", q)

    # Remove null bytes, control chars (keep printable + newline/tab)
    q = re.sub(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]", "", q)

    # Collapse whitespace (tabs, multiple spaces, newlines -> single space)
    q = re.sub(r"\s+", " ", q).strip()

    return q[:MAX_MESSAGE_LENGTH]


def validate_message(message: str) -> str | None:
    """
    Validate a sanitised message. Returns an error string or None if valid.
    """
    if not message:
        return "Pesan tidak boleh kosong"

    if len(message) < MIN_MESSAGE_LENGTH:
        return f"Pesan minimal {MIN_MESSAGE_LENGTH} karakter"

    # Reject messages that are only punctuation or emoji
    if not re.search(r"\w", message):
        return "Pesan harus mengandung huruf atau angka"

    return None  # valid


def is_valid_session_id(session_id: str) -> bool:
    """Opaque ids issued by the registry: url-safe characters only."""
    return bool(session_id) and len(session_id) <= MAX_SESSION_ID_LENGTH and bool(_SESSION_ID.match(session_id))
