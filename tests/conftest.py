from __future__ import annotations

import pytest

from transporte.main import create_app


@pytest.fixture()
def app(tmp_path):
    return create_app({"TESTING": True, "ERROR_LOG": str(tmp_path / "errors.log")})


@pytest.fixture()
def client(app):
    return app.test_client()
