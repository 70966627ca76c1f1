# config/asgi.py

# Import os because it's needed to set the 'DJANGO_SETTINGS_MODULE' environment variable.
import os
# Import get_asgi_application from django.core.asgi because 'application' needs it.
from django.core.asgi import get_asgi_application

"""
Author:
This file is the main entry-point for the server when it runs
under daphne (ASGI). Every incoming HTTP request is handed to
Django, which sends '/' to the home page and everything else to
the matching app.
"""
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

application = get_asgi_application()
