"""Database Definitions - SQLAlchemy declarative Base shared by models and migrations."""
