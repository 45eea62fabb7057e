"""Devices module package."""
