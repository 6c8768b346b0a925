# db/models.py
from datetime import datetime, timezone
import uuid

from sqlalchemy import Column, String, Text, DateTime, CheckConstraint

from todoapp.core.database import Base


def generate_uuid():
    return str(uuid.uuid4())


def utcnow():
    # naive UTC so values compare the same way on every backend
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Todo(Base):
    __tablename__ = 'todos'
    __table_args__ = (
        CheckConstraint("length(content) > 0", name="ck_todos_content_not_empty"),
    )

    id         = Column(String(36), primary_key=True, default=generate_uuid)
    content    = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow, index=True)

    def __repr__(self):
        return f"<Todo id={self.id} content={self.content!r}>"
