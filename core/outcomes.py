# core/outcomes.py

# Import dataclass from dataclasses because 'Redirect' and 'Render' are small frozen value objects.
from dataclasses import dataclass


"""
Author:
These two classes are the only answers the home page can give.
'Redirect' means "send the visitor somewhere else" and carries the
path to send them to. 'Render' means "show a page" and carries the
template to show. The view turns whichever one it gets into a real
HTTP response.
"""
@dataclass(frozen=True)
class Redirect:
    path: str


@dataclass(frozen=True)
class Render:
    template_name: str


"""
Author:
This function makes the home page decision without touching the
request, the session or the database. If the visitor is logged in it
asks for the dashboard path and returns a 'Redirect' to it. If not,
it returns a 'Render' of the home template, and the dashboard path
is never looked up.
"""
def decide_home(is_authenticated, dashboard_path, template_name='home.html'):
    if is_authenticated:
        return Redirect(dashboard_path())
    return Render(template_name)
