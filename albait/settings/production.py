"""
Production Settings - Security Hardened
"""

from .base import *
from albait.config import config, get_database_config

DEBUG = False
SECRET_KEY = config.security.secret_key
ALLOWED_HOSTS = config.security.allowed_hosts

DATABASES = {"default": get_database_config()}

# =============================================================================
# SECURITY SETTINGS - PRODUCTION
# =============================================================================

# HTTPS/SSL Security
SECURE_SSL_REDIRECT = True  # Force HTTPS
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")

# HSTS (HTTP Strict Transport Security)
SECURE_HSTS_SECONDS = 31536000  # 1 year
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True

SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = "DENY"
SECURE_REFERRER_POLICY = "strict-origin-when-cross-origin"

# =============================================================================
# CORS - Strict Production Settings (from config + hardcoded essentials)
# =============================================================================
CORS_ALLOW_ALL_ORIGINS = False

_HARDCODED_ORIGINS = [
    "https://albaittour.com",
    "https://www.albaittour.com",
]
CORS_ALLOWED_ORIGINS = list(set(_HARDCODED_ORIGINS + config.security.cors_origins))

# =============================================================================
# RATE LIMITING - Stricter for Production
# =============================================================================
REST_FRAMEWORK["DEFAULT_THROTTLE_RATES"] = {
    "anon": "30/minute",  # a chatting visitor rarely sends more than one message every 2s
}

# =============================================================================
# LOGGING - Production (Console-only for Docker)
# =============================================================================
LOGGING["root"]["level"] = "WARNING"
LOGGING["loggers"]["assistant"]["level"] = "INFO"
