"""
Tests for the guardian_service package

- Controllers, use cases and validators, with collaborators stubbed by
  ``unittest.mock``
- SQLAlchemy repositories and database initialization against SQLite
- FastAPI routes end to end through ``TestClient``
"""
