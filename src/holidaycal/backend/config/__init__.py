"""YAML-backed calendar configuration, schema models and validators."""
