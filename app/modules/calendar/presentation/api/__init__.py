"""Calendar module package."""
