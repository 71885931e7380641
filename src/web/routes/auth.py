"""
Routes d'authentification: inscription et connexion.
"""

import asyncio
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ...core.entities.principal import Principal
from ...services.auth import AuthService
from ..deps import get_auth_service

router = APIRouter(prefix="/api/auth")


class RegisterRequest(BaseModel):
    email: str
    password: str
    confirm_password: Optional[str] = Field(default=None, alias="confirmPassword")
    role: Optional[str] = None


class LoginRequest(BaseModel):
    email: str
    password: str


def principal_payload(principal: Principal) -> dict:
    """Représentation publique d'un compte (jamais le hash)."""
    return {"id": principal.id, "email": principal.email, "role": principal.role.value}


@router.post("/register")
async def register(body: RegisterRequest, service: AuthService = Depends(get_auth_service)):
    """Crée un compte et retourne un jeton d'accès."""
    result = await asyncio.to_thread(
        service.register, body.email, body.password, body.confirm_password, body.role
    )
    return JSONResponse(
        {
            "token": result.token,
            "message": "Registration successful",
            "user": principal_payload(result.principal),
        },
        status_code=201,
    )


@router.post("/login")
async def login(body: LoginRequest, service: AuthService = Depends(get_auth_service)):
    """Vérifie les identifiants et retourne un jeton d'accès."""
    result = await asyncio.to_thread(service.login, body.email, body.password)
    return {
        "token": result.token,
        "message": "Login successful",
        "user": principal_payload(result.principal),
    }
