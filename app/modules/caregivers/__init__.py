# 📄 File: app/modules/caregivers/__init__.py
# 🧭 Purpose (Layman Explanation):
# Helpers who look after a recipient, shared between family accounts by email.
# 🧪 Purpose (Technical Summary):
# Caregiver registry and linker: globally unique caregivers keyed by email, linked to
# users through ``user_caregivers`` with an access level.
# 🔗 Dependencies:
# SQLAlchemy, FastAPI, email-validator, app.shared
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
