"""Blueprint registrations for application routes."""

from flask import Flask

from .calendars import blueprint as calendars_blueprint
from .holidays import blueprint as holidays_blueprint


def register_routes(app: Flask) -> None:
    """Register all Flask blueprints with the provided application."""

    app.register_blueprint(calendars_blueprint)
    app.register_blueprint(holidays_blueprint)
