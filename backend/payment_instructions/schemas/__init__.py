"""Schemas Layer — Pydantic models for API boundaries."""
