from fastapi import APIRouter, Depends, Request
from pymongo.database import Database

from foodsupply.core.rate_limit import auth_rate_limit, limiter
from foodsupply.database.mongo_client import get_database
from foodsupply.modules.auth.schemas import LoginRequest, RegisterRequest, MessageResponse, TokenResponse
from foodsupply.modules.auth.service import AuthService

router = APIRouter(tags=["auth"])


def get_auth_service(db: Database = Depends(get_database)) -> AuthService:
    return AuthService(db)


@router.post("/register", response_model=MessageResponse, status_code=201)
@limiter.limit(auth_rate_limit)
def register(
    request: Request,
    register_data: RegisterRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Register a new user"""
    return service.register(register_data)


@router.post("/login", response_model=TokenResponse)
@limiter.limit(auth_rate_limit)
def login(
    request: Request,
    login_data: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Login and get a signed token"""
    return service.login(login_data)
