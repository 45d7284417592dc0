"""HTTP tests for the /products endpoints."""


class TestListProducts:

    def test_empty_catalog(self, client):
        response = client.get("/products")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["products"] == []
        assert body["data"]["pagination"] == {
            "page": 1, "limit": 10, "totalItems": 0, "totalPages": 0,
        }

    def test_search_and_paging(self, client, create_product):
        create_product("Red Widget")
        create_product("Blue Gadget")
        create_product("Green widget")

        response = client.get("/products", params={"search": "widget", "limit": 1})

        data = response.json()["data"]
        assert [p["name"] for p in data["products"]] == ["Green widget"]
        assert data["pagination"]["totalItems"] == 2
        assert data["pagination"]["totalPages"] == 2

    def test_bad_page(self, client):
        response = client.get("/products", params={"page": 0})
        assert response.status_code == 400
        assert response.json()["success"] is False


class TestGetProduct:

    def test_found(self, client, create_product):
        created = create_product("Widget", price=12.5)
        response = client.get(f"/products/{created['id']}")
        assert response.status_code == 200
        product = response.json()["data"]["product"]
        assert product["name"] == "Widget"
        assert product["price"] == 12.5
        assert "createdAt" in product

    def test_not_found(self, client):
        response = client.get(f"/products/{'a' * 32}")
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Product not found"}

    def test_malformed_id(self, client):
        response = client.get("/products/nope")
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid product ID"


class TestCreateProduct:

    def test_admin_creates(self, client, admin_headers):
        response = client.post(
            "/products",
            json={"name": "Widget", "price": 3, "stock": 2, "description": "d"},
            headers=admin_headers,
        )
        assert response.status_code == 201
        assert response.json()["message"] == "Product created successfully"

    def test_negative_price(self, client, admin_headers):
        response = client.post(
            "/products",
            json={"name": "Widget", "price": -1, "stock": 2, "description": "d"},
            headers=admin_headers,
        )
        assert response.status_code == 400

    def test_missing_field(self, client, admin_headers):
        response = client.post(
            "/products",
            json={"name": "Widget", "price": 1, "stock": 2},
            headers=admin_headers,
        )
        assert response.status_code == 400
        assert "description" in response.json()["message"]

    def test_unauthenticated(self, client):
        response = client.post(
            "/products",
            json={"name": "Widget", "price": 1, "stock": 2, "description": "d"},
        )
        assert response.status_code == 401

    def test_non_admin_forbidden(self, client, user_headers):
        response = client.post(
            "/products",
            json={"name": "Widget", "price": 1, "stock": 2, "description": "d"},
            headers=user_headers,
        )
        assert response.status_code == 403
        assert response.json()["message"] == "Forbidden: admin access required"


class TestUpdateAndDeleteProduct:

    def test_partial_update(self, client, admin_headers, create_product):
        created = create_product("Widget", price=10.0, stock=5)
        response = client.put(
            f"/products/{created['id']}", json={"stock": 9}, headers=admin_headers
        )
        assert response.status_code == 200
        product = response.json()["data"]["product"]
        assert product["stock"] == 9
        assert product["price"] == 10.0
        assert product["name"] == "Widget"

    def test_update_unknown(self, client, admin_headers):
        response = client.put(f"/products/{'b' * 32}", json={"stock": 1}, headers=admin_headers)
        assert response.status_code == 404

    def test_delete(self, client, admin_headers, create_product):
        created = create_product()
        response = client.delete(f"/products/{created['id']}", headers=admin_headers)
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Product deleted successfully"}
        assert client.get(f"/products/{created['id']}").status_code == 404

    def test_delete_unknown(self, client, admin_headers):
        response = client.delete(f"/products/{'c' * 32}", headers=admin_headers)
        assert response.status_code == 404

    def test_delete_requires_admin(self, client, user_headers, create_product):
        created = create_product()
        response = client.delete(f"/products/{created['id']}", headers=user_headers)
        assert response.status_code == 403
