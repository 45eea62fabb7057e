"""Reminders module package."""
