"""Operator identity passed explicitly to the routes that need it."""

from dataclasses import dataclass

from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

from .config import settings

api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


@dataclass(frozen=True)
class Operator:
    """The admin user performing an action."""

    name: str


LOCAL_OPERATOR = Operator(name="local")


async def require_operator(api_key: str | None = Security(api_key_header)) -> Operator:
    """FastAPI dependency resolving the X-API-Key header to an Operator.

    With no keys configured every caller is the ``local`` operator.

    Raises:
        HTTPException 401: Key missing or unknown
    """
    keys = settings.operator_keys
    if not keys:
        return LOCAL_OPERATOR

    if not api_key or api_key not in keys:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid API key",
            headers={"WWW-Authenticate": "API-Key"},
        )
    return Operator(name=keys[api_key])
