import os

from dotenv import load_dotenv
from fastapi import HTTPException
from sqlalchemy.orm import Session

from model.user import UserProfile, UserRole
from schemas.user_schema import Identity
from utils.authz import require_admin, require_user

load_dotenv()

ADMIN_PRINCIPALS = {p.strip() for p in os.getenv("ADMIN_PRINCIPALS", "").split(",") if p.strip()}


def get_user_by_principal(db: Session, principal: str) -> UserProfile | None:
    return db.query(UserProfile).filter_by(principal=principal).first()


def resolve_role(db: Session, principal: str) -> UserRole:
    if principal in ADMIN_PRINCIPALS:
        return UserRole.ADMIN
    user = get_user_by_principal(db, principal)
    return user.role if user else UserRole.USER


def get_caller_profile(db: Session, identity: Identity) -> UserProfile:
    require_user(identity)
    user = get_user_by_principal(db, identity.principal)
    if not user:
        raise HTTPException(status_code=404, detail="User profile not found")
    return user


def get_user_profile(db: Session, identity: Identity, principal: str) -> UserProfile:
    """Callers may read their own profile; admins may read anyone's."""
    require_user(identity)
    if principal != identity.principal and not identity.is_admin:
        raise HTTPException(status_code=403, detail="Unauthorized: can only view your own profile")
    user = get_user_by_principal(db, principal)
    if not user:
        raise HTTPException(status_code=404, detail="User profile not found")
    return user


def save_caller_profile(db: Session, identity: Identity, name: str) -> UserProfile:
    require_user(identity)
    user = get_user_by_principal(db, identity.principal)
    if user:
        user.name = name
    else:
        user = UserProfile(principal=identity.principal, name=name, role=UserRole.USER)
        db.add(user)
    db.commit()
    db.refresh(user)
    return user


def assign_role(db: Session, identity: Identity, principal: str, role: UserRole) -> UserProfile:
    require_admin(identity, "assign roles")
    user = get_user_by_principal(db, principal)
    if user:
        user.role = role
    else:
        user = UserProfile(principal=principal, name="", role=role)
        db.add(user)
    db.commit()
    db.refresh(user)
    return user
