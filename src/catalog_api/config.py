DEFAULT_PORT = 3000
DEFAULT_HOST = "127.0.0.1"

DEFAULTS = {
    "API_KEY": "my-secret-api-key",
    "API_KEY_HEADER": "X-API-Key",
}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
