from catalog_api.server import create_app
from catalog_api.store import CatalogStore

__all__ = ["create_app", "CatalogStore"]
