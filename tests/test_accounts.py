import logging

import pytest


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(username="erin", password="pw-erin-123")


def test_healthz(client) -> None:
    r = client.get("/healthz/")
    assert r.status_code == 200
    assert r.content == b"ok"


@pytest.mark.django_db
def test_dashboard_requires_login(client) -> None:
    r = client.get("/accounts/dashboard/")
    assert r.status_code == 302
    assert r["Location"] == "/accounts/login/?next=/accounts/dashboard/"


@pytest.mark.django_db
def test_dashboard_renders_for_logged_in_user(client, user) -> None:
    client.force_login(user)
    r = client.get("/accounts/dashboard/")
    assert r.status_code == 200
    assert b"erin" in r.content


@pytest.mark.django_db
def test_login_lands_on_dashboard_then_home_redirects_there(client, user) -> None:
    r = client.post("/accounts/login/", {"username": "erin", "password": "pw-erin-123"})
    assert r.status_code == 302
    assert r["Location"] == "/accounts/dashboard/"

    r = client.get("/")
    assert r.status_code == 302
    assert r["Location"] == "/accounts/dashboard/"


@pytest.mark.django_db
def test_login_page_redirects_already_authenticated_user(client, user) -> None:
    client.force_login(user)
    r = client.get("/accounts/login/")
    assert r.status_code == 302
    assert r["Location"] == "/accounts/dashboard/"


@pytest.mark.django_db
def test_logout_returns_to_public_home(client, user) -> None:
    client.force_login(user)
    r = client.get("/accounts/logout/")
    assert r.status_code == 302
    assert r["Location"] == "/"

    r = client.get("/")
    assert r.status_code == 200


@pytest.mark.django_db
def test_login_and_logout_are_logged(client, user, caplog) -> None:
    caplog.set_level(logging.INFO, logger="accounts.signals")

    client.post("/accounts/login/", {"username": "erin", "password": "pw-erin-123"})
    client.get("/accounts/logout/")

    messages = [r.getMessage() for r in caplog.records if r.name == "accounts.signals"]
    assert any(m.startswith("user logged in: erin") for m in messages)
    assert any(m.startswith("user logged out: erin") for m in messages)


@pytest.mark.django_db
def test_failed_login_is_logged_without_password(client, user, caplog) -> None:
    caplog.set_level(logging.INFO, logger="accounts.signals")

    r = client.post("/accounts/login/", {"username": "erin", "password": "wrong-password"})
    assert r.status_code == 200

    failures = [r for r in caplog.records if r.name == "accounts.signals" and r.levelno == logging.WARNING]
    assert len(failures) == 1
    assert "erin" in failures[0].getMessage()
    assert "wrong-password" not in failures[0].getMessage()


def test_home_view_does_not_log(rf, caplog) -> None:
    from config.views import home_view

    caplog.set_level(logging.DEBUG)
    home_view(rf.get("/"))
    assert not [r for r in caplog.records if r.name.startswith(("config", "core"))]
