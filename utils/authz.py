from fastapi import HTTPException

from schemas.user_schema import Identity


def require_user(identity: Identity) -> None:
    if identity.is_anonymous:
        raise HTTPException(status_code=401, detail="Unauthorized: sign in required")


def require_admin(identity: Identity, action: str) -> None:
    require_user(identity)
    if not identity.is_admin:
        raise HTTPException(status_code=403, detail=f"Unauthorized: only admins can {action}")
