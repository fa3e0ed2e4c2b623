"""Rule-based holiday calendars for hierarchical regions."""
