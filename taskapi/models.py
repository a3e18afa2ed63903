# taskapi/models.py
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import JSON, Column, UniqueConstraint
from sqlmodel import SQLModel, Field

from taskapi.utils.ids import ID_LENGTH, new_id


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _iso(dt: Optional[datetime]) -> Optional[str]:
    if dt is None:
        return None
    # SQLite hands back naive datetimes; everything we store is UTC
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.isoformat().replace("+00:00", "Z")


# ---------- Tables ----------


class User(SQLModel, table=True):
    __tablename__ = "user"
    __table_args__ = (UniqueConstraint("email", name="uq_user_email"),)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=ID_LENGTH)
    uid: str = Field(index=True)
    email: str = Field(index=True)
    display_name: str
    created_at: datetime = Field(default_factory=_utcnow, index=True)

    def to_doc(self) -> Dict[str, Any]:
        return {
            "_id": self.id,
            "uid": self.uid,
            "email": self.email,
            "displayName": self.display_name,
            "createdAt": _iso(self.created_at),
        }


class Task(SQLModel, table=True):
    __tablename__ = "task"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=ID_LENGTH)
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = Field(default=None, index=True)  # free-form, e.g. "todo"
    created_at: datetime = Field(default_factory=_utcnow, index=True)

    # every other field the client sent, plus non-string values of the columns above
    extra: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))

    def to_doc(self) -> Dict[str, Any]:
        doc = {
            "_id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status,
        }
        # non-string title/description/status live in extra and win here
        doc.update(self.extra or {})
        doc["createdAt"] = _iso(self.created_at)
        return doc
