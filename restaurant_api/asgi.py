"""
ASGI config for the restaurant order management API.
"""
import os

from django.core.asgi import get_asgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'restaurant_api.settings')

application = get_asgi_application()
