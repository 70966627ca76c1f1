# config/wsgi.py

# Import os because it's needed to set the 'DJANGO_SETTINGS_MODULE' environment variable.
import os
# Import get_wsgi_application from django.core.wsgi because 'application' needs it.
from django.core.wsgi import get_wsgi_application

"""
Author:
This file is the entry-point for a plain WSGI server (gunicorn,
uWSGI, or Django's own runserver without daphne). It points the
server at the project settings and hands back the Django app.
"""
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

application = get_wsgi_application()
