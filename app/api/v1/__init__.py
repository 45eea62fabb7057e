# 📄 File: app/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes version 1 of the care app's API so later versions can be added without
# breaking existing clients.
# 🧪 Purpose (Technical Summary):
# Package initialization for API v1: version metadata, route prefixes and OpenAPI tags
# shared by the router aggregation.
# 🔗 Dependencies:
# typing
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main.py

"""
Care Circle API Version 1

Structure:
    v1/
    ├── __init__.py          # This file
    ├── router.py            # Main v1 router aggregation
    └── health.py            # Health check endpoints

Module routers live under app/modules/<module>/presentation/api/v1/.
"""

from typing import Any, Dict

__version__ = "1.0.0"
__api_version__ = "v1"

API_V1_CONFIG = {
    "version": __version__,
    "api_version": __api_version__,
    "description": "Care Circle API Version 1",
    "features": [
        "identity",
        "care_recipients",
        "caregivers",
        "reminders",
        "devices",
        "calendar",
        "conversation_logs",
    ],
}

ROUTE_PREFIXES = {
    "auth": "/auth",
    "recipients": "/recipients",
    "caregivers": "/caregivers",
    "reminders": "/reminders",
    "devices": "/devices",
    "calendar": "/calendar",
}

API_TAGS = [
    {"name": "Authentication", "description": "Sign-in, sign-up, magic link, OAuth and sign-out"},
    {"name": "Recipients", "description": "People being cared for"},
    {"name": "Caregivers", "description": "Caregivers shared between family accounts"},
    {"name": "Reminders", "description": "Weekly call and text reminders"},
    {"name": "Devices", "description": "Recipient devices and sync"},
    {"name": "Calendar", "description": "Reminders projected as recurring events"},
    {"name": "Conversations", "description": "Transcripts of delivered calls and texts"},
    {"name": "Health Check", "description": "System health and status monitoring"},
]


def get_api_info() -> Dict[str, Any]:
    return {
        "api_info": API_V1_CONFIG,
        "route_prefixes": ROUTE_PREFIXES,
        "tags": API_TAGS,
    }


__all__ = [
    "API_V1_CONFIG",
    "ROUTE_PREFIXES",
    "API_TAGS",
    "get_api_info",
]
