"""
Todo list service: JSON API, SQLAlchemy-backed store and a small client.
"""

__version__ = "1.0.0"
