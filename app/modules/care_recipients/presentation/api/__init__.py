"""Care recipients module package."""
