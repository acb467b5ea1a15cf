from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from epf_projection.app import create_app
from epf_projection.config import AppSettings


@pytest.fixture()
def settings() -> AppSettings:
    return AppSettings(_env_file=None, max_years=20, service_name="epf-projection-test")


@pytest.fixture()
def app(settings: AppSettings) -> Flask:
    flask_app = create_app(settings)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
