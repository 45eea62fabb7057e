"""
Infrastructure layer package for the care application.
Provides the database engine and session management.
"""
