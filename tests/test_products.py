from app.models.audit import AuditLog

NEW_PRODUCT = {
    "name": "SmartInvert Pro 5kW",
    "description": "Hybrid solar inverter",
    "price": 1299.99,
    "category": "Inverters",
    "imageUrl": "/uploads/products/inverter.jpg",
    "specifications": {"power": "5kW", "efficiency": "98%"},
    "stock": 25,
    "featured": True,
}


def test_public_listing_and_filters(client, make_product):
    make_product(name="Panel", category="Solar Panels", featured=True)
    make_product(name="Pump", category="Water Pumps")
    make_product(name="Heater", category="Water Heaters", featured=True)

    assert len(client.get("/api/products").json()) == 3
    pumps = client.get("/api/products", params={"category": "Water Pumps"}).json()
    assert [p["name"] for p in pumps] == ["Pump"]
    featured = client.get("/api/products", params={"featured": "true"}).json()
    assert {p["name"] for p in featured} == {"Panel", "Heater"}


def test_get_product_and_not_found(client, make_product):
    product = make_product()
    body = client.get(f"/api/products/{product.id}").json()
    assert body["specifications"] == {"power": "400W"}
    assert body["imageUrl"] is None
    response = client.get("/api/products/999")
    assert response.status_code == 404
    assert response.json()["message"] == "Product not found"


def test_sales_manager_manages_products(client, db, make_user, login):
    login(make_user("sales_manager"))

    created = client.post("/api/products", json=NEW_PRODUCT)
    assert created.status_code == 201
    product_id = created.json()["id"]
    assert created.json()["imageUrl"] == NEW_PRODUCT["imageUrl"]

    updated = client.put(f"/api/products/{product_id}", json={"price": 1199.0, "stock": 20})
    assert updated.status_code == 200
    assert updated.json()["price"] == 1199.0
    assert updated.json()["name"] == NEW_PRODUCT["name"]

    assert client.delete(f"/api/products/{product_id}").status_code == 204
    assert client.get(f"/api/products/{product_id}").status_code == 404
    actions = [row.action for row in db.query(AuditLog).order_by(AuditLog.id)]
    assert actions == ["CREATE_PRODUCT", "UPDATE_PRODUCT", "DELETE_PRODUCT"]


def test_other_roles_cannot_mutate(client, make_user, make_product, login):
    product = make_product()
    login(make_user("blog_editor"))
    assert client.post("/api/products", json=NEW_PRODUCT).status_code == 403
    assert client.put(f"/api/products/{product.id}", json={"price": 1}).status_code == 403
    assert client.delete(f"/api/products/{product.id}").status_code == 403


def test_invalid_price_is_rejected(client, make_user, login):
    login(make_user("super_admin"))
    response = client.post("/api/products", json={**NEW_PRODUCT, "price": "lots"})
    assert response.status_code == 400
    assert response.json()["errors"][0]["loc"][-1] == "price"
    assert client.post("/api/products", json={**NEW_PRODUCT, "price": -5}).status_code == 400


def test_update_missing_product(client, make_user, login):
    login(make_user("super_admin"))
    assert client.put("/api/products/999", json={"price": 10}).status_code == 404
    assert client.delete("/api/products/999").status_code == 404


def test_category_filter_takes_precedence_over_featured(client, make_product):
    make_product(name="Panel", category="Solar Panels", featured=False)
    make_product(name="Heater", category="Water Heaters", featured=True)
    response = client.get("/api/products", params={"category": "Solar Panels", "featured": "true"})
    assert [p["name"] for p in response.json()] == ["Panel"]


def test_update_rejects_null_for_required_columns(client, make_user, make_product, login):
    product = make_product(name="Panel")
    login(make_user("sales_manager"))
    response = client.put(f"/api/products/{product.id}", json={"name": None})
    assert response.status_code == 400
    assert response.json()["errors"][0]["loc"][-1] == "name"
    assert client.put(f"/api/products/{product.id}", json={"price": None}).status_code == 400
    # imageUrl is nullable and may be cleared
    cleared = client.put(f"/api/products/{product.id}", json={"imageUrl": None})
    assert cleared.status_code == 200
    assert cleared.json()["name"] == "Panel"
