# 📄 File: app/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a package of common tools every part of the care app uses,
# such as settings, errors, logging and the database connection.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package for configuration, core primitives, infrastructure and utilities.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All application modules
