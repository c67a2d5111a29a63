"""Quality checks for writing system definitions."""
