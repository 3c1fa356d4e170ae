"""Pydantic models for request parameters and API payloads."""
