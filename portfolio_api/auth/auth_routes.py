# portfolio_api/auth/auth_routes.py
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Header, HTTPException
from pydantic import BaseModel, EmailStr, Field

from ..errors import ConstraintViolationError, NoRowsError
from ..store import StoreGateway
from .auth_utils import create_access_token, decode_token, hash_password, verify_password


class RegisterIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=256)


class LoginIn(BaseModel):
    email: EmailStr
    password: str


class UserOut(BaseModel):
    id: int
    name: str
    email: str


class AuthOut(BaseModel):
    token: str
    user: UserOut


def _bearer(authorization: Optional[str]) -> str:
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(status_code=401, detail="missing bearer token")
    return token.strip()


def create_router(store: StoreGateway) -> APIRouter:
    """
    Auth endpoints under /api/auth. The router only ever sees the store
    gateway (execute / query_row), never the engine itself.
    """
    router = APIRouter(prefix="/api/auth", tags=["auth"])

    def _issue(user_id: int, name: str, email: str) -> AuthOut:
        token = create_access_token(user_id=user_id, email=email)
        return AuthOut(token=token, user=UserOut(id=user_id, name=name, email=email))

    @router.post("/register", response_model=AuthOut, status_code=201)
    def register(body: RegisterIn):
        email = body.email.lower().strip()
        name = body.name.strip()
        if not name:
            raise HTTPException(status_code=422, detail="name is required")

        try:
            store.execute(
                "insert into app_user(name, email, password_hash) values ($1, $2, $3)",
                name,
                email,
                hash_password(body.password),
            )
        except ConstraintViolationError:
            raise HTTPException(status_code=409, detail="email already registered")

        user_id, name, email = store.query_row(
            "select id, name, email from app_user where email = $1", email
        ).scan()
        return _issue(user_id, name, email)

    @router.post("/login", response_model=AuthOut)
    def login(body: LoginIn):
        email = body.email.lower().strip()
        try:
            user_id, name, email, password_hash = store.query_row(
                "select id, name, email, password_hash from app_user where email = $1",
                email,
            ).scan()
        except NoRowsError:
            raise HTTPException(status_code=401, detail="invalid credentials")

        if not verify_password(body.password, password_hash):
            raise HTTPException(status_code=401, detail="invalid credentials")
        return _issue(user_id, name, email)

    @router.get("/me", response_model=UserOut)
    def me(authorization: Optional[str] = Header(default=None)):
        claims = decode_token(_bearer(authorization))
        if not claims or not str(claims.get("sub", "")).isdigit():
            raise HTTPException(status_code=401, detail="invalid token")

        try:
            user_id, name, email = store.query_row(
                "select id, name, email from app_user where id = $1", int(claims["sub"])
            ).scan()
        except NoRowsError:
            raise HTTPException(status_code=401, detail="user not found")
        return UserOut(id=user_id, name=name, email=email)

    return router
