"""
tg-bot-models: value objects for the Telegram Bot HTTP API.

This package provides immutable Pydantic models for Telegram request
payloads, response fragments, payment objects and reply markup, together
with their canonical JSON wire projection.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
