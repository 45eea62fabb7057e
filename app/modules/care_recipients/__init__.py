# 📄 File: app/modules/care_recipients/__init__.py
# 🧭 Purpose (Layman Explanation):
# The people being cared for: each belongs to one family member's account.
# 🧪 Purpose (Technical Summary):
# Recipient registry module over the ``parents`` table, owner-scoped CRUD with the
# ``{countryCode}_{digits}`` phone representation.
# 🔗 Dependencies:
# SQLAlchemy, FastAPI, app.shared
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, reminders, devices, calendar and conversation_logs modules
