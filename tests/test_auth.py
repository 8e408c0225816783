import logging
from datetime import datetime, timedelta, timezone

from jose import jwt

from hr_intranet.auth.utils import check_credentials, create_token, decode_token
from hr_intranet.config import Settings

from conftest import ADMIN_PASSWORD, ADMIN_USERNAME


def make_settings(**overrides):
    values = {"secret_key": "unit-secret", "admin_password": "s3cret"}
    values.update(overrides)
    return Settings(**values)


def test_session_token_round_trip():
    settings = make_settings()
    token = create_token("abc123", settings)
    assert token
    assert "abc123" != token
    assert decode_token(token, settings) == "abc123"


def test_invalid_token():
    settings = make_settings()
    assert decode_token("invalid", settings) is None
    assert decode_token("", settings) is None
    assert decode_token(None, settings) is None


def test_token_signed_with_other_secret_rejected():
    token = create_token("abc123", make_settings(secret_key="other"))
    assert decode_token(token, make_settings()) is None


def test_expired_token_rejected():
    settings = make_settings()
    token = jwt.encode(
        {"sid": "abc123", "exp": datetime.now(timezone.utc) - timedelta(minutes=1)},
        settings.secret_key,
        algorithm=settings.session_algorithm,
    )
    assert decode_token(token, settings) is None


def test_token_without_expiry_when_ttl_disabled():
    settings = make_settings(session_ttl_minutes=0)
    token = create_token("abc123", settings)
    assert "exp" not in jwt.get_unverified_claims(token)
    assert decode_token(token, settings) == "abc123"


def test_default_secret_is_random():
    assert Settings().secret_key != Settings().secret_key


def test_check_credentials():
    settings = make_settings()
    assert check_credentials("admin", "s3cret", settings)
    assert not check_credentials("admin", "wrong", settings)
    assert not check_credentials("Admin", "s3cret", settings)
    assert not check_credentials("admin", "s3cret ", settings)


def test_check_credentials_rejects_non_strings():
    settings = make_settings()
    assert not check_credentials(None, "s3cret", settings)
    assert not check_credentials("admin", None, settings)
    assert not check_credentials("admin", ["s3cret"], settings)


def test_check_credentials_unconfigured_password():
    settings = make_settings(admin_password="")
    assert not check_credentials("admin", "", settings)


def test_login_page(client):
    resp = client.get("/login")
    assert resp.status_code == 200
    assert 'name="username"' in resp.text
    assert 'name="password"' in resp.text


def test_login(client, app, settings):
    resp = client.post(
        "/login",
        data={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
        follow_redirects=False,
    )
    assert resp.status_code == 302
    assert resp.headers["location"] == "/"
    assert settings.session_cookie_name in resp.cookies
    assert client.get("/admin").status_code == 200


def test_login_json_body(client):
    resp = client.post(
        "/login",
        json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
        follow_redirects=False,
    )
    assert resp.status_code == 302
    assert client.get("/admin").status_code == 200


def test_login_invalid(client):
    resp = client.post(
        "/login",
        data={"username": ADMIN_USERNAME, "password": "wrong"},
        follow_redirects=False,
    )
    assert resp.status_code == 401
    assert resp.json() == {"detail": "Invalid credentials"}
    assert client.get("/admin").status_code == 403


def test_login_missing_fields(client):
    assert client.post("/login", data={}).status_code == 401
    assert client.post("/login", json={"username": ADMIN_USERNAME}).status_code == 401
    assert client.post("/login", content=b"{not json", headers={"content-type": "application/json"}).status_code == 401


def test_failed_login_logged(client, caplog):
    with caplog.at_level(logging.WARNING, logger="hr_intranet.security"):
        client.post("/login", data={"username": "mallory", "password": "x"})
    messages = [r.getMessage() for r in caplog.records if r.name == "hr_intranet.security"]
    assert any("[SECURITY] Failed login for 'mallory'" in m for m in messages)


def test_login_rotates_session_id(client, app, settings):
    client.get("/")
    anonymous_cookie = client.cookies.get(settings.session_cookie_name)
    anonymous_id = decode_token(anonymous_cookie, settings)

    client.post("/login", data={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    admin_id = decode_token(client.cookies.get(settings.session_cookie_name), settings)

    assert admin_id != anonymous_id
    assert app.state.sessions.get(anonymous_id) is None
    assert app.state.sessions.get(admin_id).is_admin


def test_repeated_login_stays_admin(admin_client):
    resp = admin_client.post(
        "/login",
        data={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
        follow_redirects=False,
    )
    assert resp.status_code == 302
    assert admin_client.get("/admin").status_code == 200


def test_logout(admin_client):
    resp = admin_client.get("/logout", follow_redirects=False)
    assert resp.status_code == 302
    assert resp.headers["location"] == "/"
    assert admin_client.get("/admin").status_code == 403


def test_logout_when_anonymous_is_noop(client):
    for _ in range(2):
        resp = client.get("/logout", follow_redirects=False)
        assert resp.status_code == 302
    assert client.get("/admin").status_code == 403


def test_old_admin_cookie_dead_after_logout(admin_client, settings):
    cookie = admin_client.cookies.get(settings.session_cookie_name)
    admin_client.get("/logout", follow_redirects=False)
    admin_client.cookies.set(settings.session_cookie_name, cookie)
    assert admin_client.get("/admin").status_code == 403


def test_forged_cookie_is_anonymous(client, settings):
    client.cookies.set(settings.session_cookie_name, "forged.token.value")
    assert client.get("/admin").status_code == 403
