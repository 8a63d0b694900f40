import logging

import pytest

from catalog_api.errors import STATUS_CODES, AppError, ErrorKind


class TestAppError:

    def test_not_found(self):
        err = AppError.not_found("gone")
        assert err.kind is ErrorKind.NOT_FOUND
        assert err.status_code == 404
        assert err.type_name == "NotFoundError"
        assert str(err) == "gone"

    def test_validation(self):
        err = AppError.validation("bad")
        assert err.status_code == 400
        assert err.type_name == "ValidationError"

    def test_status_override(self):
        assert AppError(ErrorKind.VALIDATION, "too big", status_code=413).status_code == 413

    def test_every_kind_has_a_status(self):
        assert set(STATUS_CODES) == set(ErrorKind)


@pytest.fixture
def failing_app(app):
    @app.get("/boom")
    def boom():
        raise RuntimeError("secret internal detail")

    return app


class TestErrorHandler:

    def test_unexpected_error_is_generic_500(self, failing_app, caplog):
        caplog.set_level(logging.ERROR, logger="catalog_api.errors")
        resp = failing_app.test_client().get("/boom")
        assert resp.status_code == 500
        assert resp.get_json() == {"error": {"message": "Internal Server Error", "type": "Error"}}
        assert "secret internal detail" not in resp.get_data(as_text=True)
        assert any(r.exc_info for r in caplog.records if r.name == "catalog_api.errors")

    def test_app_error_is_logged(self, client, auth, caplog):
        caplog.set_level(logging.WARNING, logger="catalog_api.errors")
        client.get("/api/products/missing", headers=auth)
        assert any("NotFoundError" in r.getMessage() for r in caplog.records)

    def test_unknown_route(self, client):
        resp = client.get("/nowhere")
        assert resp.status_code == 404
        assert resp.get_json()["error"]["type"] == "NotFound"

    def test_method_not_allowed(self, client):
        resp = client.post("/")
        assert resp.status_code == 405
        assert resp.get_json()["error"]["type"] == "MethodNotAllowed"
