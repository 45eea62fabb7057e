# 📄 File: app/modules/calendar/__init__.py
# 🧭 Purpose (Layman Explanation):
# Shows everyone's weekly reminders on a calendar, one colour per recipient.
# 🧪 Purpose (Technical Summary):
# Projection of weekly reminder rules into recurring calendar events. No storage of its own.
# 🔗 Dependencies:
# reminders and care_recipients modules
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
