"""Care Companion REST API."""
