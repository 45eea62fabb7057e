# 📄 File: app/modules/reminders/__init__.py
# 🧭 Purpose (Layman Explanation):
# Weekly reminders (medicine, appointments, activities) that reach a recipient by call or text.
# 🧪 Purpose (Technical Summary):
# Reminder registry: rows with a "H:MMAM" time string and seven weekday flags, owned
# through their recipient. Delivery itself happens in an external calling/texting system.
# 🔗 Dependencies:
# SQLAlchemy, FastAPI, app.shared, app.modules.care_recipients
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, calendar module
