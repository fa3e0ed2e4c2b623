"""WSGI entrypoint for deploying the holiday calendar API."""

from holidaycal.backend.app import create_app

application = create_app()
