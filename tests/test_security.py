# tests/test_security.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from taskapi import security
from taskapi.errors import Unauthorized

CLAIMS = {"uid": "u1", "email": "ada@example.com", "displayName": "Ada"}


def test_issue_then_verify_returns_claims() -> None:
    token = security.issue(CLAIMS, "s3cret")
    assert security.verify(token, "s3cret") == CLAIMS


def test_issue_does_not_mutate_claims() -> None:
    claims = dict(CLAIMS)
    security.issue(claims, "s3cret")
    assert claims == CLAIMS


def test_token_valid_within_ttl() -> None:
    nine_hours_ago = datetime.now(timezone.utc) - timedelta(hours=9)
    token = security.issue(CLAIMS, "s3cret", ttl=timedelta(hours=10), now=nine_hours_ago)
    assert security.verify(token, "s3cret")["email"] == "ada@example.com"


def test_token_expires_after_ttl() -> None:
    eleven_hours_ago = datetime.now(timezone.utc) - timedelta(hours=11)
    token = security.issue(CLAIMS, "s3cret", ttl=timedelta(hours=10), now=eleven_hours_ago)
    with pytest.raises(Unauthorized) as exc:
        security.verify(token, "s3cret")
    assert exc.value.message == "Unauthorized access"


def test_wrong_secret_rejected() -> None:
    token = security.issue(CLAIMS, "s3cret")
    with pytest.raises(Unauthorized):
        security.verify(token, "other-secret")


@pytest.mark.parametrize("token", [None, "", "garbage", "a.b.c"])
def test_missing_or_malformed_token_rejected(token) -> None:
    with pytest.raises(Unauthorized):
        security.verify(token, "s3cret")
