# accounts/views.py

# Import render, redirect from django.shortcuts because the views below need them.
from django.shortcuts import render, redirect
# Import logout from django.contrib.auth because 'logout_view' needs it.
from django.contrib.auth import logout
# Import login_required from django.contrib.auth.decorators because 'dashboard_view' needs it.
from django.contrib.auth.decorators import login_required

"""
Author:
This function shows the dashboard, the page logged-in users land on
after logging in or visiting the home page. Visitors who are not
logged in are sent to the login page first.
"""
@login_required
def dashboard_view(request):
    return render(request, 'dashboard.html')

"""
Author:
This function logs the user out and sends them back to the public
home page.
"""
def logout_view(request):
    logout(request)
    return redirect('home')
