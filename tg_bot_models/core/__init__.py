"""
Core helpers for tg-bot-models: field validation and JSON serialization.
"""
