"""Caller identity, as handed to us by the upstream identity provider.

The provider (or the proxy in front of us) is trusted to put the stable user
id in a request header. An absent or blank header means nobody signed in.
"""
import os

from fastapi import Request

AUTH_USER_HEADER = os.getenv("AUTH_USER_HEADER", "X-User-Id")


def get_current_user_id(request: Request) -> str | None:
    user_id = request.headers.get(AUTH_USER_HEADER, "").strip()
    return user_id or None
