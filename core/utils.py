# core/utils.py

# Import settings from django.conf because 'dashboard_path' reads the dashboard URL name from it.
from django.conf import settings
# Import reverse from django.urls because 'dashboard_path' needs to turn a URL name into a path.
from django.urls import reverse


"""
Author:
This helper answers one question: is the person making this request
logged in? Django's AuthenticationMiddleware puts a 'user' on every
request (an AnonymousUser for visitors). If there is no user at all,
we treat the visitor as anonymous.
"""
def is_authenticated(request):
    user = getattr(request, 'user', None)
    if user is None:
        return False
    return bool(user.is_authenticated)


"""
Author:
This helper returns the path of the page logged-in users should land
on. The URL name comes from settings so it can be moved without
touching the home page code. If the name does not exist, Django's
NoReverseMatch error is raised as-is.
"""
def dashboard_path():
    return reverse(settings.DASHBOARD_URL_NAME)
