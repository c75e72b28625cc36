# utils/jwt_utils.py
import os

from dotenv import load_dotenv
from fastapi import Depends, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError, ExpiredSignatureError
from sqlalchemy.orm import Session

from crud.user import resolve_role
from schemas.user_schema import Identity
from utils.database import get_db

load_dotenv()

# Swagger 에 securityScheme 를 등록하되, 토큰 없는 익명 호출도 허용
bearer_scheme = HTTPBearer(auto_error=False)

SECRET_KEY = os.getenv("JWT_SECRET")
ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ISSUER = os.getenv("JWT_ISSUER")


def decode_principal(token: str) -> str:
    """Verify a bearer token from the identity provider and return its subject."""
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid token")

    if ISSUER and payload.get("iss") != ISSUER:
        raise HTTPException(status_code=401, detail="Invalid token issuer")

    principal = payload.get("sub")
    if not principal:
        raise HTTPException(status_code=401, detail="Token has no subject")
    return principal


def verify_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str | None:
    """
    - Authorization 헤더가 없으면 None (익명)
    - 있으면 검증 후 payload['sub'] 리턴
    """
    if credentials is None:
        return None
    return decode_principal(credentials.credentials)


def get_identity(
    principal: str | None = Depends(verify_token),
    db: Session = Depends(get_db),
) -> Identity:
    if principal is None:
        return Identity.anonymous()
    return Identity(principal=principal, role=resolve_role(db, principal))
