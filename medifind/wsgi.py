"""
WSGI config for the MediFind project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "medifind.settings")

application = get_wsgi_application()
