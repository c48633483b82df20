from decimal import Decimal


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_create_and_get_user(client):
    resp = client.post("/users/", json={"id": 10, "name": "Carol"})
    assert resp.status_code == 201
    assert client.get("/users/10").json() == {"id": 10, "name": "Carol"}
    assert client.get("/users/999").status_code == 404


def test_cart_requires_existing_user(client):
    assert client.get("/cart/", params={"user_id": 999}).status_code == 404
    assert client.get("/cart/").status_code == 422


def test_products_endpoints(client):
    resp = client.post("/products/", json={"name": "Lamp", "price": "15.00"})
    assert resp.status_code == 201
    product_id = resp.json()["id"]

    resp = client.put(f"/products/{product_id}", json={"name": "Lamp", "price": "16.00"})
    assert Decimal(resp.json()["price"]) == Decimal("16.00")

    assert len(client.get("/products/").json()) == 3
    assert client.delete(f"/products/{product_id}").status_code == 204
    assert client.get(f"/products/{product_id}").status_code == 404
    assert client.post("/products/", json={"name": "Bad", "price": "-1"}).status_code == 422


def test_add_item_validation_and_unknown_product(client):
    params = {"user_id": 1}
    assert client.post("/cart/items", params=params, json={"product_id": 1, "quantity": 0}).status_code == 422
    assert client.post("/cart/items", params=params, json={"product_id": 999, "quantity": 1}).status_code == 404


def test_cart_endpoints(client, products):
    keyboard, mouse = products
    params = {"user_id": 1}

    resp = client.post("/cart/items", params=params, json={"product_id": keyboard.id, "quantity": 2})
    assert resp.status_code == 200
    client.post("/cart/items", params=params, json={"product_id": mouse.id})

    cart = client.get("/cart/", params=params).json()
    assert len(cart["items"]) == 2
    assert Decimal(cart["total"]) == Decimal("25.25")

    total = client.get("/cart/total", params=params).json()
    assert Decimal(total["total"]) == Decimal("25.25")

    cart = client.delete(f"/cart/items/{mouse.id}", params=params).json()
    assert [i["product_id"] for i in cart["items"]] == [keyboard.id]

    assert client.delete("/cart/", params=params).status_code == 204
    assert client.get("/cart/", params=params).json()["items"] == []


def test_order_errors_map_to_status_codes(client, products):
    keyboard, _ = products

    # brak koszyka
    assert client.post("/orders/", params={"user_id": 2}).status_code == 404

    client.get("/cart/", params={"user_id": 2})
    assert client.post("/orders/", params={"user_id": 2}).status_code == 400

    client.post("/cart/items", params={"user_id": 1}, json={"product_id": keyboard.id, "quantity": 1})
    order_id = client.post("/orders/", params={"user_id": 1}).json()["id"]

    assert client.get(f"/orders/{order_id}", params={"user_id": 2}).status_code == 403
    assert client.put(f"/orders/{order_id}/cancel", params={"user_id": 2}).status_code == 403
    assert client.put("/orders/999/cancel", params={"user_id": 1}).status_code == 404

    assert client.put(f"/orders/{order_id}/cancel", params={"user_id": 1}).status_code == 200
    assert client.put(f"/orders/{order_id}/cancel", params={"user_id": 1}).status_code == 409


def test_checkout_scenario_over_http(client):
    product = client.post("/products/", json={"name": "P", "price": "10.50"}).json()
    params = {"user_id": 1}

    assert client.get("/cart/", params=params).json()["items"] == []

    cart = client.post("/cart/items", params=params, json={"product_id": product["id"], "quantity": 2}).json()
    assert Decimal(cart["total"]) == Decimal("21.00")

    cart = client.post("/cart/items", params=params, json={"product_id": product["id"], "quantity": 3}).json()
    assert [i["quantity"] for i in cart["items"]] == [5]
    assert Decimal(cart["total"]) == Decimal("52.50")

    resp = client.post("/orders/", params=params)
    assert resp.status_code == 201
    order = resp.json()
    assert order["status"] == "PENDING"
    assert Decimal(order["total_amount"]) == Decimal("52.50")
    assert len(order["items"]) == 1
    assert client.get("/cart/", params=params).json()["items"] == []

    # zmiana ceny nie zmienia zamowienia
    client.put(f"/products/{product['id']}", json={"name": "P", "price": "99.00"})
    [listed] = client.get("/orders/", params=params).json()
    assert Decimal(listed["total_amount"]) == Decimal("52.50")
    assert Decimal(listed["items"][0]["product_price"]) == Decimal("10.50")

    cancelled = client.put(f"/orders/{order['id']}/cancel", params=params).json()
    assert cancelled["status"] == "CANCELLED"
    assert client.put(f"/orders/{order['id']}/cancel", params=params).status_code == 409


def test_product_put_without_description_keeps_it(client):
    product = client.post("/products/", json={"name": "Lamp", "price": "15.00", "description": "Desk lamp"}).json()

    resp = client.put(f"/products/{product['id']}", json={"name": "Lamp", "price": "18.00"})

    assert resp.json()["description"] == "Desk lamp"
    assert Decimal(resp.json()["price"]) == Decimal("18.00")
