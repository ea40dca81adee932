"""Console university system backed by SQLite: users with roles, departments and login."""

__version__ = "0.1.0"

__all__ = ["__version__"]