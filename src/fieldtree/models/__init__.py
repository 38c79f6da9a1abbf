"""Data models for field-error conversion."""
