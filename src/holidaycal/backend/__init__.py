"""Backend services for the holidaycal project."""
