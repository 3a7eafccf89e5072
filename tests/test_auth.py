from datetime import datetime, timedelta

from app.config.settings import settings
from app.models.session import UserSession
from app.models.user import User
from conftest import PASSWORD


def register_payload(**overrides):
    payload = {
        "username": "sunny",
        "email": "sunny@limpiastech.com",
        "fullName": "Sunny Day",
        "password": PASSWORD,
        "confirmPassword": PASSWORD,
    }
    payload.update(overrides)
    return payload


def test_register_creates_customer_and_logs_in(client, db):
    response = client.post("/api/register", json=register_payload())
    assert response.status_code == 201
    body = response.json()
    assert body["username"] == "sunny"
    assert body["role"] == "customer"
    assert body["fullName"] == "Sunny Day"
    assert "password" not in body and "hashedPassword" not in body

    stored = db.query(User).filter(User.username == "sunny").one()
    assert stored.hashed_password != PASSWORD

    me = client.get("/api/user")
    assert me.status_code == 200
    assert me.json()["id"] == body["id"]


def test_register_blank_role_defaults_to_customer(client):
    response = client.post("/api/register", json=register_payload(role=""))
    assert response.status_code == 201
    assert response.json()["role"] == "customer"


def test_register_duplicate_username_creates_nothing(client, db, make_user):
    make_user(username="sunny", email="other@limpiastech.com")
    response = client.post("/api/register", json=register_payload())
    assert response.status_code == 400
    assert response.json()["message"] == "Username already exists"
    assert db.query(User).count() == 1


def test_register_duplicate_email_creates_nothing(client, db, make_user):
    make_user(username="other", email="sunny@limpiastech.com")
    response = client.post("/api/register", json=register_payload())
    assert response.status_code == 400
    assert response.json()["message"] == "Email already exists"
    assert db.query(User).count() == 1


def test_register_password_mismatch(client, db):
    response = client.post("/api/register", json=register_payload(confirmPassword="Different1"))
    assert response.status_code == 400
    assert response.json()["message"] == "Passwords do not match"
    assert db.query(User).count() == 0


def test_register_invalid_shape_lists_field_errors(client):
    response = client.post("/api/register", json=register_payload(username="no spaces!", email="not-an-email"))
    assert response.status_code == 400
    body = response.json()
    fields = {error["loc"][-1] for error in body["errors"]}
    assert {"username", "email"} <= fields


def test_anonymous_cannot_register_staff_role(client, db):
    response = client.post("/api/register", json=register_payload(role="super_admin"))
    assert response.status_code == 403
    assert db.query(User).count() == 0


def test_super_admin_can_register_staff_and_keeps_session(client, make_user, login):
    admin = make_user("super_admin")
    login(admin)
    response = client.post("/api/register", json=register_payload(role="accountant"))
    assert response.status_code == 201
    assert response.json()["role"] == "accountant"
    assert client.get("/api/user").json()["id"] == admin.id


def test_login_with_username_and_email(client, make_user):
    user = make_user(username="solar_fan")
    by_name = client.post("/api/login", json={"username": "solar_fan", "password": PASSWORD})
    assert by_name.status_code == 200
    assert by_name.json()["id"] == user.id

    by_email = client.post("/api/login", json={"username": "solar_fan@limpiastech.com", "password": PASSWORD})
    assert by_email.status_code == 200
    assert by_email.json()["id"] == user.id


def test_login_sets_http_only_session_cookie(client, make_user):
    make_user(username="solar_fan")
    response = client.post("/api/login", json={"username": "solar_fan", "password": PASSWORD})
    cookie = response.headers["set-cookie"]
    assert cookie.startswith(f"{settings.SESSION_COOKIE_NAME}=")
    assert "HttpOnly" in cookie
    assert f"Max-Age={7 * 24 * 60 * 60}" in cookie


def test_wrong_password_fails_without_session(client, db, make_user):
    make_user(username="solar_fan")
    response = client.post("/api/login", json={"username": "solar_fan", "password": "WrongPass1"})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid username or password"
    assert "set-cookie" not in response.headers
    assert db.query(UserSession).count() == 0
    assert client.get("/api/user").status_code == 401


def test_unknown_user_fails(client):
    response = client.post("/api/login", json={"username": "ghost@limpiastech.com", "password": PASSWORD})
    assert response.status_code == 401


def test_logout_invalidates_session(client, db, make_user, login):
    login(make_user())
    assert db.query(UserSession).count() == 1

    response = client.post("/api/logout")
    assert response.status_code == 200
    assert db.query(UserSession).count() == 0
    assert client.get("/api/user").status_code == 401


def test_login_again_replaces_previous_session(client, db, make_user, login):
    user = make_user()
    login(user)
    login(user)
    assert db.query(UserSession).count() == 1


def test_expired_session_is_rejected(client, db, make_user, login):
    login(make_user())
    session = db.query(UserSession).one()
    session.expires_at = datetime.utcnow() - timedelta(seconds=1)
    db.commit()

    assert client.get("/api/user").status_code == 401
    db.expire_all()
    assert db.query(UserSession).count() == 0


def test_session_is_not_extended_by_requests(client, db, make_user, login):
    login(make_user())
    issued = db.query(UserSession).one().expires_at
    client.get("/api/user")
    db.expire_all()
    assert db.query(UserSession).one().expires_at == issued


def test_tampered_cookie_is_ignored(client, make_user, login):
    login(make_user())
    client.cookies.clear()
    client.cookies.set(settings.SESSION_COOKIE_NAME, "forged.token.value")
    assert client.get("/api/user").status_code == 401


def test_role_change_applies_on_next_request(client, db, make_user, login):
    user = make_user("customer")
    login(user)
    assert client.get("/api/users").status_code == 403

    user.role = "super_admin"
    db.commit()
    assert client.get("/api/users").status_code == 200
