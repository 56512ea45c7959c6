"""
WSGI config for the Al-Bait assistant backend.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "albait.settings")

application = get_wsgi_application()
