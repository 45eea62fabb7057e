"""Conversation logs module package."""
