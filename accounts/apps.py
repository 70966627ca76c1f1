# accounts/apps.py

# Import AppConfig from django.apps because it's the base class for a Django app configuration.
from django.apps import AppConfig

"""
Author:
This class tells Django how to treat the "accounts" app. It
sets the app's name and also runs a special "ready" function
when the app first loads. This "ready" function is used to
import the "signals.py" file, which hooks up the receivers that
write a log line every time someone logs in, logs out, or fails
to log in.
"""
class AccountsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'accounts'

    def ready(self):
        import accounts.signals
