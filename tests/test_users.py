from app.models.audit import AuditLog
from app.models.user import User
from conftest import PASSWORD


def test_only_super_admin_lists_users(client, make_user, login):
    make_user("super_admin")
    manager = make_user("sales_manager")
    login(manager)
    assert client.get("/api/users").status_code == 403


def test_cannot_delete_primary_admin_or_self(client, db, make_user, login):
    root = make_user("customer")
    assert root.id == 1
    admin = make_user("super_admin")
    victim = make_user("customer")
    login(admin)

    response = client.delete(f"/api/users/{root.id}")
    assert response.status_code == 400

    response = client.delete(f"/api/users/{admin.id}")
    assert response.status_code == 400
    assert response.json()["message"] == "Cannot delete your own account"

    response = client.delete(f"/api/users/{victim.id}")
    assert response.status_code == 204
    assert db.query(User).filter(User.id == victim.id).first() is None


def test_delete_protection_applies_to_any_caller(client, make_user, login):
    make_user("super_admin")
    accountant = make_user("accountant")
    login(accountant)
    assert client.delete("/api/users/1").status_code == 403
    assert client.delete(f"/api/users/{accountant.id}").status_code == 403


def test_delete_unknown_user(client, make_user, login):
    make_user("customer")
    login(make_user("super_admin"))
    assert client.delete("/api/users/999").status_code == 404


def test_admin_updates_role_and_password(client, db, make_user, login):
    admin = make_user("super_admin")
    target = make_user("customer")
    login(admin)

    response = client.put(f"/api/users/{target.id}", json={"role": "blog_editor", "password": "NewSecret9", "fullName": "Blog Writer"})
    assert response.status_code == 200
    assert response.json()["role"] == "blog_editor"
    assert response.json()["fullName"] == "Blog Writer"

    client.post("/api/logout")
    login(target, password="NewSecret9")
    assert db.query(AuditLog).filter(AuditLog.action == "UPDATE_USER").count() == 1


def test_admin_update_rejects_taken_email_and_bad_role(client, make_user, login):
    admin = make_user("super_admin")
    target = make_user("customer")
    login(admin)
    assert client.put(f"/api/users/{target.id}", json={"email": admin.email}).status_code == 400
    assert client.put(f"/api/users/{target.id}", json={"role": "overlord"}).status_code == 400


def test_profile_read_and_update(client, make_user, login):
    user = make_user("customer")
    login(user)
    assert client.get("/api/profile").json()["username"] == user.username

    response = client.put("/api/profile", json={"fullName": "Renamed Customer", "phone": "+1555000111"})
    assert response.status_code == 200
    assert response.json()["fullName"] == "Renamed Customer"
    assert client.get("/api/user").json()["phone"] == "+1555000111"


def test_profile_requires_session(client):
    assert client.get("/api/profile").status_code == 401


def test_change_password(client, make_user, login):
    user = make_user("customer")
    login(user)

    wrong = client.put("/api/users/password", json={"currentPassword": "Nope12345", "newPassword": "Brighter42"})
    assert wrong.status_code == 401

    mismatch = client.put("/api/users/password", json={"currentPassword": PASSWORD, "newPassword": "Brighter42", "confirmPassword": "Brighter43"})
    assert mismatch.status_code == 400

    ok = client.put("/api/users/password", json={"currentPassword": PASSWORD, "newPassword": "Brighter42", "confirmPassword": "Brighter42"})
    assert ok.status_code == 200

    client.post("/api/logout")
    login(user, password="Brighter42")


def test_user_with_orders_is_kept(client, make_user, make_product, login):
    make_user("super_admin")
    buyer = make_user("customer")
    product = make_product()
    login(buyer)
    client.post("/api/orders", json={
        "shippingAddress": {"address": "1 Main", "city": "Kisumu", "postalCode": "40100", "country": "Kenya"},
        "paymentMethod": "card",
        "items": [{"productId": product.id, "quantity": 1}],
    })

    login(make_user("super_admin"))
    response = client.delete(f"/api/users/{buyer.id}")
    assert response.status_code == 400
    assert response.json()["message"] == "Users with orders cannot be deleted"


def test_updates_reject_null_name_and_email(client, make_user, login):
    customer = make_user("customer")
    original_name = customer.full_name
    login(make_user("super_admin"))
    assert client.put(f"/api/users/{customer.id}", json={"fullName": None}).status_code == 400
    assert client.put(f"/api/users/{customer.id}", json={"email": None}).status_code == 400

    login(customer)
    assert client.put("/api/profile", json={"fullName": None}).status_code == 400
    assert client.get("/api/profile").json()["fullName"] == original_name
