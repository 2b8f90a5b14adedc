import secrets
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyHeader

from resilink.core.config import settings

API_KEY_HEADER = "X-API-KEY"

api_key_scheme = APIKeyHeader(name=API_KEY_HEADER, auto_error=False)


def actor_id_for_key(api_key: str) -> str:
    """Identify the caller by a short, non-secret prefix of its key, e.g. APIKey_RESIL."""
    return f"APIKey_{api_key[:5]}"


async def get_actor_id(api_key: Optional[str] = Depends(api_key_scheme)) -> str:
    if not api_key or not secrets.compare_digest(api_key.encode(), settings.API_KEY.encode()):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid API key",
            headers={"WWW-Authenticate": API_KEY_HEADER},
        )
    return actor_id_for_key(api_key)
