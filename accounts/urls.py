# accounts/urls.py

from django.urls import path
from django.contrib.auth import views as auth_views
from .views import dashboard_view, logout_view

urlpatterns = [
    # Auth
    path(
        'login/',
        auth_views.LoginView.as_view(
            template_name='accounts/login.html',
            redirect_authenticated_user=True,
        ),
        name='login',
    ),
    path('logout/', logout_view, name='logout'),

    # Core Pages
    path('dashboard/', dashboard_view, name='dashboard'),
]
