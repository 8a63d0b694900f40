from __future__ import annotations

from flask import Blueprint, current_app, g, jsonify, request

from catalog_api import query
from catalog_api.errors import AppError
from catalog_api.middleware import PRODUCTS_PREFIX, parse_json_body
from catalog_api.store import CatalogStore
from catalog_api.validation import validate_new_product, validate_product_fields

STORE_EXTENSION = "catalog_store"
GREETING = "Hello World! Welcome to the Product API."

products_bp = Blueprint("products", __name__, url_prefix=PRODUCTS_PREFIX)
products_bp.before_request(parse_json_body)


def get_store() -> CatalogStore:
    return current_app.extensions[STORE_EXTENSION]


def index():
    return GREETING, 200, {"Content-Type": "text/plain; charset=utf-8"}


@products_bp.get("")
def list_products():
    results = get_store().list()
    category = request.args.get("category")
    if category:
        results = query.filter_by_category(results, category)
    page = query.paginate(results, request.args.get("page"), request.args.get("limit"))
    return jsonify(page), 200


# Declared ahead of /<product_id> so "search" is never read as an id.
@products_bp.get("/search")
def search_products():
    results = query.search(get_store().list(), request.args.get("q"))
    return jsonify(results), 200


@products_bp.get("/<product_id>")
def get_product(product_id: str):
    product = get_store().find_by_id(product_id)
    if product is None:
        raise AppError.not_found(f"Product with ID {product_id} not found.")
    return jsonify(product), 200


@products_bp.post("")
def create_product():
    validate_new_product(g.body)
    product = get_store().insert(g.body)
    return jsonify(product), 201


@products_bp.put("/<product_id>")
def update_product(product_id: str):
    validate_product_fields(g.body)
    product = get_store().update(product_id, g.body)
    return jsonify(product), 200


@products_bp.delete("/<product_id>")
def delete_product(product_id: str):
    get_store().delete(product_id)
    return "", 204
