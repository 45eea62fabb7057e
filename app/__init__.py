# 📄 File: app/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python this 'app' folder holds the care coordination app and records its version.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version metadata for the Care Circle FastAPI backend.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)

"""
Care Circle - care coordination backend

Family members manage the people they care for, the caregivers helping them, weekly
call/text reminders, recipient devices and a calendar of upcoming reminders.
"""

__version__ = "1.0.0"
__title__ = "Care Circle API"
__description__ = "Care coordination backend for families"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
]
