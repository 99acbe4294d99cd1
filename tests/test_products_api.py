"""HTTP tests for the product, category and greeting routes."""

import pytest

PRODUCTS = "/api/v1/products"
CATEGORIES = "/api/v1/categories"


def create(client, **payload):
    body = {"name": "Test Product", "description": "Description", "price": 29.99}
    body.update(payload)
    response = client.post(f"{PRODUCTS}/", json=body)
    assert response.status_code == 201, response.text
    return response.json()


class TestGreeting:

    def test_hello(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.text == "Hello, FastAPI!"

    def test_welcome(self, client):
        assert client.get("/welcome").text == "Welcome to the Product Catalog API!"


class TestProductCrud:

    def test_create_product(self, client):
        product = create(client)
        assert product["id"] == 1
        assert product["name"] == "Test Product"
        assert product["price"] == 29.99
        assert product["stock_quantity"] == 0
        assert product["category_id"] is None

    def test_get_product(self, client):
        product_id = create(client)["id"]
        response = client.get(f"{PRODUCTS}/{product_id}")
        assert response.status_code == 200
        assert response.json()["name"] == "Test Product"

    def test_product_not_found(self, client):
        response = client.get(f"{PRODUCTS}/999")
        assert response.status_code == 404
        assert response.json() == {"detail": "Product not found with id: 999"}

    def test_list_products(self, client):
        create(client, name="Widget")
        create(client, name="Gadget")
        names = {p["name"] for p in client.get(f"{PRODUCTS}/").json()}
        assert names == {"Widget", "Gadget"}

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "", "price": 1.0},
            {"name": "   ", "price": 1.0},
            {"name": "Widget", "price": 0},
            {"name": "Widget", "price": -5},
            {"name": "Widget", "price": 1.0, "stock_quantity": -1},
            {"price": 1.0},
            {"name": "Widget", "price": True},
            {"name": "Widget", "price": 1.0, "stock_quantity": True},
        ],
    )
    def test_create_rejects_invalid_payload(self, client, payload):
        assert client.post(f"{PRODUCTS}/", json=payload).status_code == 422
        assert client.get(f"{PRODUCTS}/").json() == []

    def test_update_product(self, client):
        product_id = create(client)["id"]
        response = client.put(
            f"{PRODUCTS}/{product_id}",
            json={"id": 77, "name": "Renamed", "price": 10.0, "stock_quantity": 2},
        )
        assert response.status_code == 200
        assert response.json() == {
            "id": product_id,
            "name": "Renamed",
            "description": None,
            "price": 10.0,
            "stock_quantity": 2,
            "category_id": None,
        }

    def test_update_missing_product(self, client):
        response = client.put(f"{PRODUCTS}/5", json={"name": "x", "price": 1.0})
        assert response.status_code == 404

    def test_patch_changes_only_price(self, client):
        product_id = create(client)["id"]
        response = client.patch(f"{PRODUCTS}/{product_id}", json={"price": 9.99})
        assert response.status_code == 200
        body = response.json()
        assert body["price"] == 9.99
        assert body["name"] == "Test Product"
        assert body["description"] == "Description"

    def test_patch_accepts_integer_price_and_ignores_unknown_keys(self, client):
        product_id = create(client)["id"]
        body = client.patch(f"{PRODUCTS}/{product_id}", json={"price": 12, "colour": "red"}).json()
        assert body["price"] == 12.0
        assert "colour" not in body

    def test_patch_null_description_clears_it(self, client):
        product_id = create(client)["id"]
        body = client.patch(f"{PRODUCTS}/{product_id}", json={"description": None}).json()
        assert body["description"] is None

    @pytest.mark.parametrize(
        "payload",
        [{"price": "cheap"}, {"price": None}, {"price": True}, {"name": None}, {"name": " "}, {"price": -1}],
    )
    def test_patch_rejects_invalid_values(self, client, payload):
        product_id = create(client)["id"]
        assert client.patch(f"{PRODUCTS}/{product_id}", json=payload).status_code == 422
        assert client.get(f"{PRODUCTS}/{product_id}").json()["price"] == 29.99

    def test_patch_missing_product(self, client):
        assert client.patch(f"{PRODUCTS}/3", json={"price": 9.99}).status_code == 404

    def test_patch_missing_product_is_reported_before_missing_category(self, client):
        response = client.patch(f"{PRODUCTS}/999", json={"category_id": 5})
        assert response.status_code == 404
        assert response.json() == {"detail": "Product not found with id: 999"}

    def test_delete_product(self, client):
        product_id = create(client)["id"]
        assert client.delete(f"{PRODUCTS}/{product_id}").status_code == 204
        assert client.get(f"{PRODUCTS}/{product_id}").status_code == 404
        assert client.delete(f"{PRODUCTS}/{product_id}").status_code == 404

    def test_ids_are_not_reused_after_delete(self, client):
        assert create(client, name="Widget", price=9.99)["id"] == 1
        assert create(client, name="Gadget", price=19.99)["id"] == 2
        client.delete(f"{PRODUCTS}/1")
        assert create(client, name="Gizmo", price=5.0)["id"] == 3
        assert {p["id"] for p in client.get(f"{PRODUCTS}/").json()} == {2, 3}


class TestProductQueries:

    @pytest.fixture
    def catalogue(self, client):
        create(client, name="Smart Phone", price=299.0, stock_quantity=4)
        create(client, name="Phone Case", price=15.0, stock_quantity=40)
        create(client, name="Laptop", price=999.0, stock_quantity=12)
        return client

    def test_search_ignores_case(self, catalogue):
        upper = {p["id"] for p in catalogue.get(f"{PRODUCTS}/search", params={"name": "PHONE"}).json()}
        lower = {p["id"] for p in catalogue.get(f"{PRODUCTS}/search", params={"name": "phone"}).json()}
        assert upper == lower == {1, 2}

    def test_search_requires_name(self, catalogue):
        assert catalogue.get(f"{PRODUCTS}/search").status_code == 422

    def test_price_range(self, catalogue):
        response = catalogue.get(f"{PRODUCTS}/price-range", params={"min": 10, "max": 299})
        assert {p["name"] for p in response.json()} == {"Smart Phone", "Phone Case"}

    def test_low_stock_default_threshold(self, catalogue):
        assert [p["name"] for p in catalogue.get(f"{PRODUCTS}/low-stock").json()] == ["Smart Phone"]

    def test_low_stock_custom_threshold(self, catalogue):
        response = catalogue.get(f"{PRODUCTS}/low-stock", params={"threshold": 20})
        assert {p["name"] for p in response.json()} == {"Smart Phone", "Laptop"}

    def test_page_uses_default_size(self, catalogue):
        body = catalogue.get(f"{PRODUCTS}/page").json()
        assert [p["id"] for p in body["content"]] == [1, 2]
        assert body["size"] == 2
        assert body["total_elements"] == 3
        assert body["total_pages"] == 2

    def test_page_sorted_descending(self, catalogue):
        body = catalogue.get(
            f"{PRODUCTS}/page", params={"page": 0, "size": 3, "sort_by": "price", "direction": "desc"}
        ).json()
        assert [p["name"] for p in body["content"]] == ["Laptop", "Smart Phone", "Phone Case"]

    def test_page_size_is_capped(self, catalogue):
        body = catalogue.get(f"{PRODUCTS}/page", params={"size": 500}).json()
        assert body["size"] == 5

    def test_page_rejects_negative_page(self, catalogue):
        assert catalogue.get(f"{PRODUCTS}/page", params={"page": -1}).status_code == 422


class TestCategories:

    def test_category_crud(self, client):
        response = client.post(f"{CATEGORIES}/", json={"name": "Electronics", "description": "Gadgets"})
        assert response.status_code == 201
        category_id = response.json()["id"]

        assert client.get(f"{CATEGORIES}/{category_id}").json()["name"] == "Electronics"
        renamed = client.put(f"{CATEGORIES}/{category_id}", json={"name": "Devices"})
        assert renamed.json() == {"id": category_id, "name": "Devices", "description": None}
        assert [c["name"] for c in client.get(f"{CATEGORIES}/").json()] == ["Devices"]
        assert client.delete(f"{CATEGORIES}/{category_id}").status_code == 204
        assert client.get(f"{CATEGORIES}/{category_id}").status_code == 404

    def test_duplicate_category_name_conflicts(self, client):
        client.post(f"{CATEGORIES}/", json={"name": "Books"})
        response = client.post(f"{CATEGORIES}/", json={"name": "books"})
        assert response.status_code == 409

    def test_blank_category_name_is_rejected(self, client):
        assert client.post(f"{CATEGORIES}/", json={"name": " "}).status_code == 422

    def test_products_by_category(self, client):
        category_id = client.post(f"{CATEGORIES}/", json={"name": "Electronics"}).json()["id"]
        response = client.post(
            f"{PRODUCTS}/", params={"category_id": category_id}, json={"name": "Phone", "price": 299.0}
        )
        assert response.status_code == 201
        assert response.json()["category_id"] == category_id
        create(client, name="Chair")

        listed = client.get(f"{PRODUCTS}/category/{category_id}").json()
        assert [p["name"] for p in listed] == ["Phone"]

    def test_unknown_category(self, client):
        response = client.post(f"{PRODUCTS}/", params={"category_id": 4}, json={"name": "Phone", "price": 1.0})
        assert response.status_code == 404
        assert response.json()["detail"] == "Category not found with id: 4"
        assert client.get(f"{PRODUCTS}/category/4").status_code == 404

    def test_deleting_category_deletes_its_products(self, client):
        category_id = client.post(f"{CATEGORIES}/", json={"name": "Electronics"}).json()["id"]
        client.post(f"{PRODUCTS}/", params={"category_id": category_id}, json={"name": "Phone", "price": 1.0})

        assert client.delete(f"{CATEGORIES}/{category_id}").status_code == 204
        assert client.get(f"{PRODUCTS}/").json() == []
