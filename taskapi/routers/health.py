from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from taskapi.config import Settings
from taskapi.deps import get_settings

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
def root():
    return "Task Management API is running!"


@router.get("/health")
def health(settings: Settings = Depends(get_settings)):
    return {"ok": True, "env": settings.ENV}
