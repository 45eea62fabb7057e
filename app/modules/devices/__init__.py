# 📄 File: app/modules/devices/__init__.py
# 🧭 Purpose (Layman Explanation):
# Gadgets a recipient uses (watches, speakers, phones) and whether they are connected.
# 🧪 Purpose (Technical Summary):
# Device registry with a simulated sync: status moves to ``syncing`` immediately and a
# background task completes it after a configurable delay.
# 🔗 Dependencies:
# SQLAlchemy, FastAPI BackgroundTasks, app.shared
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
