"""
WSGI config for the restaurant order management API.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'restaurant_api.settings')

application = get_wsgi_application()
