# models/todo.py
from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field


class TodoCreate(BaseModel):
    # Checked by the store, so an empty or missing value surfaces as a
    # TodoValidationError rather than a generic schema error.
    content: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("content", "action"),
    )


class Todo(BaseModel):
    id: str
    content: str
    created_at: datetime

    class Config:
        from_attributes = True
