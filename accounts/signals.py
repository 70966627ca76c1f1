# accounts/signals.py

import logging

# Import the login signals from django.contrib.auth.signals because we need to listen for them.
from django.contrib.auth.signals import user_logged_in, user_logged_out, user_login_failed
# Import receiver from django.dispatch because it's the decorator used to connect a function to a signal.
from django.dispatch import receiver

logger = logging.getLogger(__name__)


def _client_ip(request):
    if request is None:
        return '-'
    return request.META.get('REMOTE_ADDR', '-')


"""
Author:
These functions are "signal receivers." Django's auth system fires a
signal when a session starts, when it ends, and when a login attempt
is rejected. Each receiver writes one log line so account activity
can be followed without touching the views themselves.
"""
@receiver(user_logged_in)
def log_user_logged_in(sender, request, user, **kwargs):
    logger.info("user logged in: %s (ip=%s)", user.get_username(), _client_ip(request))


@receiver(user_logged_out)
def log_user_logged_out(sender, request, user, **kwargs):
    # user is None when the session had no authenticated user
    username = user.get_username() if user is not None else '-'
    logger.info("user logged out: %s (ip=%s)", username, _client_ip(request))


@receiver(user_login_failed)
def log_user_login_failed(sender, credentials, request=None, **kwargs):
    # credentials arrive with the password already scrubbed
    logger.warning(
        "login failed for %s (ip=%s)",
        credentials.get('username', '-'),
        _client_ip(request),
    )
