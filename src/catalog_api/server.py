from __future__ import annotations

import logging
import os
from typing import Any, Mapping, Optional

from flask import Flask

from catalog_api import config
from catalog_api.errors import register_error_handlers
from catalog_api.middleware import log_request, log_response, require_api_key
from catalog_api.routes import STORE_EXTENSION, index, products_bp
from catalog_api.store import CatalogStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Mapping[str, Any]] = None, store: Optional[CatalogStore] = None) -> Flask:
    app = Flask(__name__)
    app.config.update(config.DEFAULTS)
    app.config.from_prefixed_env("CATALOG")
    if settings:
        app.config.update(settings)
    app.json.sort_keys = False

    app.extensions[STORE_EXTENSION] = store if store is not None else CatalogStore()

    app.before_request(log_request)
    app.before_request(require_api_key)
    app.after_request(log_response)

    app.add_url_rule("/", "index", index, methods=["GET"])
    app.register_blueprint(products_bp)

    register_error_handlers(app)
    return app


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format=config.LOG_FORMAT,
    )
    port = int(os.environ.get("PORT", str(config.DEFAULT_PORT)))
    host = os.environ.get("HOST", config.DEFAULT_HOST)
    app = create_app()
    logger.info("Server is running on http://%s:%s", host, port)
    # threaded=True; the store locks around every operation
    app.run(host=host, port=port, threaded=True)


if __name__ == "__main__":
    main()
