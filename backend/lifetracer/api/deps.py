"""
Shared API dependencies.

Sign-in happens upstream (auth gateway); requests reach this service with
the authenticated user id in a header and every query is scoped to it.
"""
from fastapi import HTTPException, Request

from lifetracer.config import get_settings


def get_owner_id(request: Request) -> str:
    header = get_settings().owner_header
    owner_id = (request.headers.get(header) or "").strip()
    if not owner_id:
        raise HTTPException(status_code=401, detail=f"Missing {header} header")
    return owner_id
