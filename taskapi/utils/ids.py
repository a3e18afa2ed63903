# taskapi/utils/ids.py
import re
import secrets

from taskapi.errors import InvalidInput

ID_LENGTH = 24  # hex chars, same textual shape as a Mongo ObjectId
_ID_RE = re.compile(r"[0-9a-fA-F]{%d}" % ID_LENGTH)


def new_id() -> str:
    return secrets.token_hex(ID_LENGTH // 2)


def is_valid_id(value) -> bool:
    return isinstance(value, str) and _ID_RE.fullmatch(value) is not None


def normalize_id(value) -> str:
    """
    Validate a client-supplied record id and return it lower-cased.
    Raise InvalidInput (400) so a malformed id never reaches storage.
    """
    if not is_valid_id(value):
        raise InvalidInput("Invalid ID format")
    return value.lower()
