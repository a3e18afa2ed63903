# taskapi/security.py
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import ExpiredSignatureError, JWTError, jwt

from taskapi.errors import Unauthorized

log = logging.getLogger("taskapi.security")

ALGORITHM = "HS256"
COOKIE_NAME = "token"
DEFAULT_TTL = timedelta(hours=10)

# registered claims we add on issue and strip on verify
_RESERVED = ("exp", "iat")


def issue(
    claims: Dict[str, Any],
    secret: str,
    ttl: timedelta = DEFAULT_TTL,
    now: Optional[datetime] = None,
) -> str:
    """Sign a copy of `claims` with an expiry `ttl` after `now`."""
    issued_at = now or datetime.now(timezone.utc)
    to_encode = dict(claims)
    to_encode.update({"iat": issued_at, "exp": issued_at + ttl})
    return jwt.encode(to_encode, secret, algorithm=ALGORITHM)


def verify(token: Optional[str], secret: str) -> Dict[str, Any]:
    """
    Decode a token issued by `issue` and return its claim set.
    Raises Unauthorized for a missing, tampered, malformed or expired token;
    the reason only goes to the debug log.
    """
    if not token:
        log.debug("token rejected: missing")
        raise Unauthorized()
    try:
        payload = jwt.decode(token, secret, algorithms=[ALGORITHM])
    except ExpiredSignatureError:
        log.debug("token rejected: expired")
        raise Unauthorized()
    except JWTError as e:
        log.debug("token rejected: %s", e)
        raise Unauthorized()
    if not isinstance(payload, dict):
        raise Unauthorized()
    return {k: v for k, v in payload.items() if k not in _RESERVED}
