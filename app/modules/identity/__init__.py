# 📄 File: app/modules/identity/__init__.py
# 🧭 Purpose (Layman Explanation):
# Works out who is using the app: signing in, signing out and finding the account behind a session.
# 🧪 Purpose (Technical Summary):
# Identity module: Supabase-backed authentication, first-login provisioning of the
# ``users`` row and the ``get_auth_context`` dependency used by every other module.
# 🔗 Dependencies:
# supabase, python-jose, SQLAlchemy
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, every module router (get_auth_context)
