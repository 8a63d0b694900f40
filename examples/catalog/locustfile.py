import os
import random
import string
from threading import Lock
from locust import HttpUser, task, between


API_KEY = os.environ.get("CATALOG_API_KEY", "my-secret-api-key")
CATEGORIES = ["electronics", "kitchen", "books", "garden"]

_ids_lock = Lock()
_ids = []


def _rand_name() -> str:
    return "prod-" + "".join(random.choice(string.ascii_lowercase) for _ in range(6))


class CatalogUser(HttpUser):
    wait_time = between(0.05, 0.15)

    def on_start(self):
        self.client.headers.update({"X-API-Key": API_KEY})

    @task(5)
    def list_products(self):
        self.client.get("/api/products", name="GET /api/products")

    @task(2)
    def list_by_category(self):
        category = random.choice(CATEGORIES)
        self.client.get(
            f"/api/products?category={category}&page=1&limit=5",
            name="GET /api/products?category",
        )

    @task(2)
    def search(self):
        self.client.get("/api/products/search?q=prod", name="GET /api/products/search")

    @task(3)
    def create_and_get(self):
        body = {
            "name": _rand_name(),
            "description": "load test product",
            "price": round(random.uniform(1.0, 100.0), 2),
            "category": random.choice(CATEGORIES),
            "inStock": random.random() < 0.8,
        }
        r = self.client.post("/api/products", json=body, name="POST /api/products")
        if r.status_code == 201:
            pid = r.json().get("id")
            if isinstance(pid, str):
                with _ids_lock:
                    _ids.append(pid)
                self.client.get(f"/api/products/{pid}", name="GET /api/products/:id")

    @task(1)
    def update_or_delete(self):
        with _ids_lock:
            pid = random.choice(_ids) if _ids else None
        if pid is None:
            return
        if random.random() < 0.5:
            self.client.put(
                f"/api/products/{pid}",
                json={"price": round(random.uniform(1.0, 100.0), 2)},
                name="PUT /api/products/:id",
            )
        else:
            r = self.client.delete(f"/api/products/{pid}", name="DELETE /api/products/:id")
            if r.status_code in (204, 404):
                with _ids_lock:
                    try:
                        _ids.remove(pid)
                    except ValueError:
                        pass

    @task(1)
    def unauthorized(self):
        with self.client.get(
            "/api/products",
            headers={"X-API-Key": "wrong"},
            name="GET /api/products (bad key)",
            catch_response=True,
        ) as r:
            if r.status_code == 401:
                r.success()
            else:
                r.failure(f"expected 401, got {r.status_code}")
