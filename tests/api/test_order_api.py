"""HTTP tests for cart, order, report and identity endpoints."""

import pytest


def _add(client, headers, product_id, quantity):
    return client.post(
        "/cart", json={"productId": product_id, "quantity": quantity}, headers=headers
    )


class TestCartApi:

    def test_get_cart_without_one(self, client, user_headers):
        response = client.get("/cart", headers=user_headers)
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["cart"]["items"] == []
        assert data["subtotal"] == 0

    def test_add_merges_and_resolves(self, client, user_headers, create_product):
        widget = create_product("Widget", price=2.5, stock=10)
        _add(client, user_headers, widget["id"], 1)
        response = _add(client, user_headers, widget["id"], 3)

        assert response.status_code == 200
        cart = response.json()["data"]["cart"]
        assert len(cart["items"]) == 1
        assert cart["items"][0]["quantity"] == 4
        assert cart["items"][0]["product"]["name"] == "Widget"
        assert response.json()["data"]["subtotal"] == 10.0

    def test_exceeds_stock(self, client, user_headers, create_product):
        widget = create_product(stock=2)
        response = _add(client, user_headers, widget["id"], 3)
        assert response.status_code == 400
        assert response.json()["message"] == "Quantity exceeds available stock (2)"

    def test_unknown_product(self, client, user_headers):
        response = _add(client, user_headers, "d" * 32, 1)
        assert response.status_code == 404

    @pytest.mark.parametrize("quantity", [0, -1, 1.5, "2"])
    def test_bad_quantity(self, client, user_headers, create_product, quantity):
        widget = create_product()
        response = _add(client, user_headers, widget["id"], quantity)
        assert response.status_code == 400

    def test_bad_product_id(self, client, user_headers):
        response = _add(client, user_headers, "123", 1)
        assert response.status_code == 400

    def test_remove_missing_line(self, client, user_headers, create_product):
        widget = create_product()
        gadget = create_product("Gadget")
        _add(client, user_headers, widget["id"], 1)

        response = client.delete(f"/cart/{gadget['id']}", headers=user_headers)

        assert response.status_code == 404
        items = client.get("/cart", headers=user_headers).json()["data"]["cart"]["items"]
        assert [i["productId"] for i in items] == [widget["id"]]

    def test_remove_without_cart(self, client, user_headers, create_product):
        widget = create_product()
        response = client.delete(f"/cart/{widget['id']}", headers=user_headers)
        assert response.status_code == 404
        assert response.json()["message"] == "Cart not found"

    def test_requires_identity(self, client):
        assert client.get("/cart").status_code == 401


class TestOrderApi:

    def test_place_order(self, client, user_headers, create_product):
        a = create_product("Product A", price=10.0, stock=5)
        _add(client, user_headers, a["id"], 3)

        response = client.post("/orders", headers=user_headers)

        assert response.status_code == 201
        order = response.json()["data"]["order"]
        assert order["totalAmount"] == 30.0
        assert order["userId"] == "user-1"
        assert order["items"] == [{
            "productId": a["id"],
            "name": "Product A",
            "price": 10.0,
            "quantity": 3,
            "lineTotal": 30.0,
        }]
        assert client.get(f"/products/{a['id']}").json()["data"]["product"]["stock"] == 2
        assert client.get("/cart", headers=user_headers).json()["data"]["cart"]["items"] == []

    def test_empty_cart(self, client, user_headers):
        response = client.post("/orders", headers=user_headers)
        assert response.status_code == 400
        assert response.json()["message"] == "Cart is empty"

    def test_insufficient_stock_changes_nothing(
        self, client, user_headers, admin_headers, create_product
    ):
        a = create_product("Product A", price=10.0, stock=5)
        b = create_product("Product B", price=5.0, stock=2)
        _add(client, user_headers, a["id"], 3)
        _add(client, user_headers, b["id"], 2)
        client.put(f"/products/{b['id']}", json={"stock": 1}, headers=admin_headers)

        response = client.post("/orders", headers=user_headers)

        assert response.status_code == 400
        assert "Product B" in response.json()["message"]
        assert client.get(f"/products/{a['id']}").json()["data"]["product"]["stock"] == 5
        assert client.get(f"/products/{b['id']}").json()["data"]["product"]["stock"] == 1
        cart = client.get("/cart", headers=user_headers).json()["data"]["cart"]
        assert {i["productId"]: i["quantity"] for i in cart["items"]} == {a["id"]: 3, b["id"]: 2}

    def test_product_gone(self, client, user_headers, admin_headers, create_product):
        a = create_product()
        _add(client, user_headers, a["id"], 1)
        client.delete(f"/products/{a['id']}", headers=admin_headers)

        response = client.post("/orders", headers=user_headers)

        assert response.status_code == 400
        assert response.json()["message"] == "A product in the cart no longer exists"

    def test_carts_are_isolated(self, client, user_headers, other_user_headers, create_product):
        a = create_product(stock=5)
        _add(client, user_headers, a["id"], 2)
        response = client.post("/orders", headers=other_user_headers)
        assert response.status_code == 400


class TestReportApi:

    def test_summary(self, client, user_headers, admin_headers, create_product):
        a = create_product("Apple", price=1.0, stock=10)
        b = create_product("Banana", price=2.0, stock=10)
        _add(client, user_headers, a["id"], 4)
        _add(client, user_headers, b["id"], 1)
        client.post("/orders", headers=user_headers)

        response = client.get("/reports/summary", headers=admin_headers)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["totalOrders"] == 1
        assert data["totalRevenue"] == 6.0
        assert data["topProducts"][0] == {"productId": a["id"], "name": "Apple", "totalSold": 4}

    def test_requires_admin(self, client, user_headers):
        assert client.get("/reports/summary", headers=user_headers).status_code == 403


class TestIdentityApi:

    def test_me(self, client, user_headers):
        response = client.get("/me", headers=user_headers)
        assert response.status_code == 200
        assert response.json()["data"] == {"userId": "user-1", "role": "user"}

    def test_me_unauthenticated(self, client):
        response = client.get("/me")
        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Unauthorized"}

    def test_me_bad_token(self, client):
        response = client.get("/me", headers={"Authorization": "Bearer x.y.z"})
        assert response.status_code == 401


class TestEnvelope:

    def test_health(self, client):
        assert client.get("/health").json() == {"success": True, "message": "Server is running"}

    def test_unknown_route(self, client):
        response = client.get("/nowhere")
        assert response.status_code == 404
        assert response.json()["success"] is False
