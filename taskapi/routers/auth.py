# taskapi/routers/auth.py
import logging
from datetime import timedelta
from typing import Any, Dict

from fastapi import APIRouter, Depends, Response

from taskapi import security
from taskapi.config import Settings
from taskapi.deps import get_current_user, get_settings, get_user_directory
from taskapi.schemas import LoginIn, SuccessOut
from taskapi.services.users import UserDirectory

router = APIRouter(prefix="", tags=["auth"])
log = logging.getLogger("taskapi.auth")


def _cookie_kwargs(settings: Settings) -> Dict[str, Any]:
    return {
        "httponly": True,
        "secure": settings.is_production,  # HTTPS only in production
        "samesite": "none",
    }


# ----------------- Login -----------------


@router.post("/login", response_model=SuccessOut)
def login(
    payload: LoginIn,
    response: Response,
    users: UserDirectory = Depends(get_user_directory),
    settings: Settings = Depends(get_settings),
):
    """
    Store the user on first login, then hand out a session cookie.
    Returning users get a fresh token; nothing is inserted for them.
    """
    user, created = users.find_or_create(payload.uid, payload.email, payload.displayName)
    log.info("login email=%s new_user=%s", user.email, created)

    claims = {"uid": payload.uid, "email": payload.email, "displayName": payload.displayName}
    token = security.issue(
        claims,
        settings.ACCESS_TOKEN_SECRET,
        ttl=timedelta(hours=settings.TOKEN_TTL_HOURS),
    )
    response.set_cookie(
        security.COOKIE_NAME,
        token,
        max_age=settings.TOKEN_TTL_HOURS * 3600,
        **_cookie_kwargs(settings),
    )
    return SuccessOut()


# ----------------- Logout -----------------


@router.post("/logout", response_model=SuccessOut)
def logout(response: Response, settings: Settings = Depends(get_settings)):
    response.delete_cookie(security.COOKIE_NAME, **_cookie_kwargs(settings))
    return SuccessOut()


# ----------------- User lookup -----------------


@router.get("/user/{email}", dependencies=[Depends(get_current_user)])
def get_user(
    email: str,
    users: UserDirectory = Depends(get_user_directory),
):
    return users.get_by_email(email).to_doc()
