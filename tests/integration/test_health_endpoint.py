"""Integration tests for application endpoints."""

from http import HTTPStatus

from flask.testing import FlaskClient

from holidaycal.backend.config import calendar_config
from holidaycal.backend.version import get_project_version


def test_health_endpoint(client: FlaskClient) -> None:
    """Ensure the health endpoint returns a successful status payload."""
    response = client.get("/health")
    assert response.status_code == HTTPStatus.OK
    payload = response.get_json()
    assert payload["status"] == "ok"
    assert payload["version"] == get_project_version()
    assert payload["supported_calendars"] == list(calendar_config.available_calendars())
    assert response.mimetype == "application/json"


def test_wsgi_entrypoint_exposes_application() -> None:
    from holidaycal.backend.passenger_wsgi import application

    assert application.test_client().get("/health").status_code == HTTPStatus.OK
