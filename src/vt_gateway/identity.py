"""FastAPI dependency: get_current_user_id.

Identity is established upstream (reverse proxy / front end) and passed in the
X-User-Id header; this service performs no authentication of its own.

Usage in any router:
    from src.vt_gateway.identity import get_current_user_id

    @router.get("/mine")
    async def mine(user_id: str = Depends(get_current_user_id)):
        ...
"""

from fastapi import Header

from src.vt_common.errors import MissingIdentityError


async def get_current_user_id(
    x_user_id: str | None = Header(None, alias="X-User-Id"),
) -> str:
    """Return the caller's user id, 401 (MissingIdentityError) if absent or blank."""
    if x_user_id is None or not x_user_id.strip():
        raise MissingIdentityError()
    return x_user_id.strip()
