"""Pydantic models for Transitland entities and responses."""
