# 📄 File: app/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Marks the api folder as a package: the front door of the care app where requests come in.
# 🧪 Purpose (Technical Summary):
# Package initialization for the API layer (versioned routers and HTTP middleware).
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# app.main.py

"""
Care Circle API Package

Structure:
    api/
    ├── __init__.py          # This file
    ├── middleware/          # Error handling and request logging
    └── v1/                  # API version 1 (router aggregation, health)
"""
