"""
ASGI config for the MediFind project.
"""
import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "medifind.settings")

application = get_asgi_application()
