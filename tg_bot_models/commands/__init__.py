"""
CLI command implementations for tg-bot-models.
"""
