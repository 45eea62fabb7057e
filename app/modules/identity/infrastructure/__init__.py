"""Identity module package."""
