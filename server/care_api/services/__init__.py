"""Service layer: AI provider and file storage."""
