from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from crud.user import assign_role, get_caller_profile, get_user_profile, save_caller_profile
from schemas.user_schema import AdminStatusSchema, Identity, RoleSchema, UserProfileRequest, UserProfileSchema
from utils.database import get_db
from utils.jwt_utils import get_identity

user_router = APIRouter()


@user_router.get("/me", response_model=UserProfileSchema)
def get_profile(identity: Identity = Depends(get_identity), db: Session = Depends(get_db)):
    return get_caller_profile(db, identity)


@user_router.put("/me", response_model=UserProfileSchema)
def save_profile(
    body: UserProfileRequest,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
):
    return save_caller_profile(db, identity, body.name)


@user_router.get("/me/role", response_model=RoleSchema)
def get_role(identity: Identity = Depends(get_identity)):
    return RoleSchema(role=identity.role)


@user_router.get("/me/admin", response_model=AdminStatusSchema)
def is_admin(identity: Identity = Depends(get_identity)):
    return AdminStatusSchema(is_admin=identity.is_admin)


@user_router.get("/{principal}", response_model=UserProfileSchema)
def get_profile_of(principal: str, identity: Identity = Depends(get_identity), db: Session = Depends(get_db)):
    return get_user_profile(db, identity, principal)


@user_router.put("/{principal}/role", response_model=RoleSchema)
def set_role(
    principal: str,
    body: RoleSchema,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
):
    user = assign_role(db, identity, principal, body.role)
    return RoleSchema(role=user.role)
