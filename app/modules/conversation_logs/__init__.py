# 📄 File: app/modules/conversation_logs/__init__.py
# 🧭 Purpose (Layman Explanation):
# Lets a family member read what was said on the reminder calls and texts sent to a recipient.
# 🧪 Purpose (Technical Summary):
# Read-only view over ``scheduled_calls`` and ``scheduled_texts``, which the external
# calling/texting system writes.
# 🔗 Dependencies:
# SQLAlchemy, FastAPI, reminders and care_recipients modules
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
