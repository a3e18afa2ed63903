from typing import Optional

from pydantic import BaseModel


class LoginIn(BaseModel):
    # presence is checked by UserDirectory so a missing field is a 400, not a 422
    uid: Optional[str] = None
    email: Optional[str] = None
    displayName: Optional[str] = None


class SuccessOut(BaseModel):
    success: bool = True
