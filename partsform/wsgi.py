"""
WSGI config for the PartsForm search API.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "partsform.settings")

application = get_wsgi_application()
