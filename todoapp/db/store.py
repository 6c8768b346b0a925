# todoapp/db/store.py

import logging
from datetime import timedelta
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from todoapp.core.database import Database
from todoapp.core.exceptions import StoreError, TodoValidationError
from todoapp.db.models import Todo as DBTodo, generate_uuid, utcnow
from todoapp.models.todo import Todo

logger = logging.getLogger(__name__)


def validate_content(content) -> str:
    """Return `content` unchanged if it is a non-empty string, else raise."""
    if content is None:
        raise TodoValidationError("The content field is required")
    if not isinstance(content, str):
        raise TodoValidationError("The content field must be a string")
    if content == "":
        raise TodoValidationError("The content field cannot be empty")
    return content


class TodoStore:
    """
    Durable storage for todo records.

    Every call opens its own session and performs a single commit, so each
    create/delete is atomic and no state is shared between requests.
    """

    def __init__(self, database: Database):
        self.database = database

    def list(self, newest_first: bool = True) -> List[Todo]:
        """
        All records ordered by creation time; an empty store gives [].

        Concurrent creates can share a timestamp, so id breaks ties to keep
        the order deterministic.
        """
        if newest_first:
            order = (DBTodo.created_at.desc(), DBTodo.id.desc())
        else:
            order = (DBTodo.created_at.asc(), DBTodo.id.asc())
        try:
            with self.database.session() as db:
                rows = db.query(DBTodo).order_by(*order).all()
                return [Todo.model_validate(row) for row in rows]
        except SQLAlchemyError as e:
            logger.error(f"Error listing todos: {e}")
            raise StoreError("Failed to list todos") from e

    def create(self, content) -> Todo:
        """
        Persist a new record and return it.

        Raises TodoValidationError for a missing, non-string or empty
        content before the database is touched.
        """
        content = validate_content(content)

        with self.database.session() as db:
            try:
                created_at = utcnow()
                latest = (
                    db.query(DBTodo.created_at)
                    .order_by(DBTodo.created_at.desc())
                    .first()
                )
                # sequential creates get strictly increasing timestamps
                if latest is not None and created_at <= latest[0]:
                    created_at = latest[0] + timedelta(microseconds=1)

                todo = DBTodo(id=generate_uuid(), content=content, created_at=created_at)
                db.add(todo)
                db.commit()
                db.refresh(todo)
            except SQLAlchemyError as e:
                db.rollback()
                logger.error(f"Error creating todo: {e}")
                raise StoreError("Failed to create todo") from e

            logger.debug(f"Created todo {todo.id}")
            return Todo.model_validate(todo)

    def delete(self, todo_id: str) -> Optional[Todo]:
        """
        Remove the record with `todo_id` and return it.

        An unknown id is a no-op that returns None, so repeating a delete
        is harmless.
        """
        with self.database.session() as db:
            try:
                todo = db.query(DBTodo).filter(DBTodo.id == todo_id).first()
                if todo is None:
                    logger.debug(f"Delete of unknown todo {todo_id} ignored")
                    return None
                removed = Todo.model_validate(todo)
                db.delete(todo)
                db.commit()
            except SQLAlchemyError as e:
                db.rollback()
                logger.error(f"Error deleting todo {todo_id}: {e}")
                raise StoreError("Failed to delete todo") from e

            logger.debug(f"Deleted todo {todo_id}")
            return removed

    def count(self) -> int:
        try:
            with self.database.session() as db:
                return db.query(DBTodo).count()
        except SQLAlchemyError as e:
            logger.error(f"Error counting todos: {e}")
            raise StoreError("Failed to count todos") from e
