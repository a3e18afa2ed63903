# taskapi/deps.py
from typing import Any, Dict, Optional

from fastapi import Cookie, Depends, Header, Request
from sqlmodel import Session

from taskapi import security
from taskapi.config import Settings
from taskapi.db import get_session
from taskapi.services.tasks import TaskStore
from taskapi.services.users import UserDirectory


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_user_directory(session: Session = Depends(get_session)) -> UserDirectory:
    return UserDirectory(session)


def get_task_store(
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> TaskStore:
    return TaskStore(session, reset_created_at=settings.TASK_UPDATE_RESETS_CREATED_AT)


async def get_current_user(
    token: Optional[str] = Cookie(None),
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """
    Reads the `token` cookie (or Authorization: Bearer <token> for
    non-browser clients) and returns the verified claim set.
    """
    raw = token
    if not raw and authorization and authorization.lower().startswith("bearer "):
        raw = authorization[7:].strip()
    return security.verify(raw, settings.ACCESS_TOKEN_SECRET)
