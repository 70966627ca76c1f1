# core/apps.py

# Import AppConfig from django.apps because it's the base class for a Django app configuration.
from django.apps import AppConfig

"""
Author:
This class tells Django that an app named "core" exists.
This app holds the project-wide pieces the home page is built on:
the 'Redirect' / 'Render' answers in 'outcomes.py' and the small
login and dashboard helpers in 'utils.py'.
"""
class CoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core'
