# models/__init__.py
"""
Pydantic models for request/response validation
"""

from .todo import TodoCreate, Todo

__all__ = [
    "TodoCreate",
    "Todo",
]
