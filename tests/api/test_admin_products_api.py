"""Tests for admin product endpoints."""

from fastapi.testclient import TestClient

from catalog_api.domain import ProductAggregate, ProductStatus
from factories import make_aggregate, make_product


def product_payload(**overrides) -> dict:
    payload = {
        "name": "Cotton T-Shirt",
        "description": "A soft cotton tee",
        "categoryId": "cat-2",
        "status": "published",
        "options": [{"optionName": "Size", "displayOrder": 0}],
        "variants": [
            {
                "sku": "TEE-S",
                "barcode": "4901234567894",
                "price": 2900,
                "displayOrder": 0,
                "options": [{"optionName": "Size", "optionValue": "S"}],
            },
            {
                "sku": "TEE-M",
                "price": 3100,
                "displayOrder": 1,
                "options": [{"optionName": "Size", "optionValue": "M"}],
            },
        ],
    }
    payload.update(overrides)
    return payload


class TestCreateProduct:
    """Tests for POST /api/admin/products."""

    def test_creates_product(self, client: TestClient) -> None:
        response = client.post("/api/admin/products", json=product_payload())

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Cotton T-Shirt"
        assert data["categoryId"] == "cat-2"
        assert data["status"] == "published"
        assert [v["sku"] for v in data["variants"]] == ["TEE-S", "TEE-M"]
        assert data["variants"][0]["barcode"] == "4901234567894"
        assert data["variants"][0]["options"][0]["optionValue"] == "S"
        assert len(data["id"]) == 36

    def test_created_product_is_listed(self, client: TestClient) -> None:
        created = client.post("/api/admin/products", json=product_payload()).json()

        listed = client.get("/api/products").json()["items"]

        assert [item["id"] for item in listed] == [created["id"]]
        assert listed[0]["minPrice"] == 2900
        assert listed[0]["maxPrice"] == 3100

    def test_defaults_to_draft(self, client: TestClient) -> None:
        payload = product_payload()
        del payload["status"]

        response = client.post("/api/admin/products", json=payload)

        assert response.json()["status"] == "draft"

    def test_blank_name(self, client: TestClient) -> None:
        response = client.post("/api/admin/products", json=product_payload(name="   "))

        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["message"] == "Product name must not be blank"
        assert data["details"] == [
            {"field": "name", "message": "Product name must not be blank"}
        ]

    def test_variant_option_not_declared(self, client: TestClient) -> None:
        variants = [
            {
                "sku": "TEE-RED",
                "price": 2900,
                "options": [{"optionName": "Color", "optionValue": "Red"}],
            }
        ]

        response = client.post(
            "/api/admin/products", json=product_payload(variants=variants)
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_unknown_category(self, client: TestClient) -> None:
        response = client.post(
            "/api/admin/products", json=product_payload(categoryId="missing")
        )

        assert response.status_code == 404
        data = response.json()
        assert data["error_code"] == "CATEGORY_NOT_FOUND"
        assert data["message"] == "Category not found: missing"

    def test_sku_reused_across_products(self, client: TestClient) -> None:
        client.post("/api/admin/products", json=product_payload())

        response = client.post(
            "/api/admin/products", json=product_payload(name="Another tee")
        )

        assert response.status_code == 400
        assert response.json()["message"] == 'SKU "TEE-S" is already in use'

    def test_missing_field(self, client: TestClient) -> None:
        payload = product_payload()
        del payload["categoryId"]

        response = client.post("/api/admin/products", json=payload)

        assert response.status_code == 422
        assert response.json()["details"][0]["field"] == "categoryId"


class TestListAdminProducts:
    """Tests for GET /api/admin/products."""

    def test_lists_all_statuses(self, client: TestClient, repositories) -> None:
        repositories.products.save(make_aggregate("p1", minutes=1))
        repositories.products.save(
            make_aggregate("p2", status=ProductStatus.DRAFT, minutes=2)
        )
        repositories.products.save(
            ProductAggregate(product=make_product("p3", status=ProductStatus.DRAFT))
        )

        response = client.get("/api/admin/products")

        assert response.status_code == 200
        data = response.json()
        assert data["pagination"]["total"] == 3
        assert data["draftCount"] == 2
        assert data["publishedCount"] == 1
        bare = next(item for item in data["items"] if item["id"] == "p3")
        assert bare["minPrice"] is None
        assert bare["variantCount"] == 0
        assert bare["isPublishable"] is True

    def test_statuses_filter(self, client: TestClient, repositories) -> None:
        repositories.products.save(make_aggregate("p1"))
        repositories.products.save(make_aggregate("p2", status=ProductStatus.DRAFT))

        response = client.get("/api/admin/products", params={"statuses": "draft"})

        assert [item["id"] for item in response.json()["items"]] == ["p2"]
