# config/views.py

# Import settings from django.conf because 'home_view' reads the home template name from it.
from django.conf import settings
# Import render, redirect from django.shortcuts because 'home_view' needs them.
from django.shortcuts import render, redirect

# Import decide_home, Redirect, Render from core.outcomes because 'home_view' makes its decision with them.
from core.outcomes import decide_home, Redirect, Render
# Import is_authenticated, dashboard_path from core.utils because they are what 'decide_home' is given.
from core.utils import is_authenticated, dashboard_path

"""
Author:
This function handles the main home page ('/') of the website.
It checks if the user is already logged in. If they are, it
sends them straight to their dashboard. If they are not logged
in, it shows them the public landing page with options to
log in. Both answers come back from 'decide_home' and are
turned into exactly one response here.
"""
def home_view(request):
    outcome = decide_home(
        is_authenticated(request),
        dashboard_path,
        template_name=settings.HOME_TEMPLATE,
    )
    if isinstance(outcome, Redirect):
        return redirect(outcome.path)
    if isinstance(outcome, Render):
        return render(request, outcome.template_name)
    raise TypeError(f"Unknown home outcome: {outcome!r}")
