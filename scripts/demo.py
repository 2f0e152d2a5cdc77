#!/usr/bin/env python3
"""
Demo script for the catalog service.

Runs the product and user CRUD flow against an in-process app, the same
calls the front-end makes.
"""

from fastapi.testclient import TestClient

from catalog_service.api.app import create_app
from catalog_service.config import Settings


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def show(label: str, response) -> None:
    body = response.json() if response.content else ""
    print(f"  {label:<28} {response.status_code}  {body}")


def demo_products(client: TestClient) -> None:
    """Demonstrate the product lifecycle."""
    print_section("Products")

    created = client.post("/api/products", json={"name": "Ноутбук", "price": 75000})
    show("POST /api/products", created)
    product_id = created.json()["id"]

    show(f"GET /api/products/{product_id}", client.get(f"/api/products/{product_id}"))
    show(
        f"PATCH /api/products/{product_id}",
        client.patch(f"/api/products/{product_id}", json={"price": 70000}),
    )
    show(f"DELETE /api/products/{product_id}", client.delete(f"/api/products/{product_id}"))
    show(f"GET /api/products/{product_id}", client.get(f"/api/products/{product_id}"))

    print("\n🔍 Validation:")
    show("POST without price", client.post("/api/products", json={"name": "Мышь"}))


def demo_users(client: TestClient) -> None:
    """Demonstrate the user collection with seeded data."""
    print_section("Users")

    users = client.get("/api/users").json()
    print(f"  {len(users)} seeded users: {', '.join(u['name'] for u in users)}")

    first = users[0]["id"]
    show("PATCH with empty body", client.patch(f"/api/users/{first}", json={}))
    show("PATCH age", client.patch(f"/api/users/{first}", json={"age": 17}))


def main() -> None:
    settings = Settings(seed_data=True, log_level="WARNING")
    with TestClient(create_app(settings)) as client:
        demo_products(client)
        demo_users(client)
        print_section("Health")
        show("GET /health", client.get("/health"))


if __name__ == "__main__":
    main()
