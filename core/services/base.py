"""
Base Service
=============

Foundation for all service classes. Provides a standardised
logger and request/session-ID generation.
"""

import logging
import uuid


class BaseService:
    """
    All service classes inherit from this.

    Subclass example::

        class SessionRegistry(BaseService):
            def get_or_create(self, session_id):
                ...

    Features:
        - ``cls.logger`` — pre-configured logger using the subclass module name
        - ``cls.generate_request_id()`` — opaque ID for request/session tracing
    """

    logger: logging.Logger = logging.getLogger(__name__)

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # Each subclass gets its own logger named after its module
        cls.logger = logging.getLogger(cls.__module__)

    @staticmethod
    def generate_request_id() -> str:
        """Generate a short opaque request ID for tracing."""
        return uuid.uuid4().hex[:12]
