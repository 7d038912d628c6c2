import logging
import re
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt
from fastapi import HTTPException
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from foodsupply.config.settings import settings
from foodsupply.modules.auth.models import USERS_COLLECTION
from foodsupply.modules.auth.schemas import LoginRequest, RegisterRequest, MessageResponse, TokenResponse

logger = logging.getLogger(__name__)

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhdw]?)\s*$")
_DURATION_UNITS = {
    "": "seconds",
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
    "w": "weeks",
}


def parse_duration(value: str) -> timedelta:
    """Parse a token lifetime such as "3600", "15m", "1h" or "7d"."""
    match = _DURATION_RE.match(str(value).lower())
    if not match:
        raise ValueError(f"Invalid token lifetime: {value!r}")
    amount, unit = match.groups()
    return timedelta(**{_DURATION_UNITS[unit]: int(amount)})


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))


def create_access_token(email: str) -> str:
    """Sign a token carrying the email. It is issued only; no route verifies it."""
    issued_at = datetime.now(timezone.utc)
    payload = {
        "email": email,
        "iat": issued_at,
        "exp": issued_at + parse_duration(settings.expires_in),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


class AuthService:
    def __init__(self, db: Database):
        self.users = db[USERS_COLLECTION]

    def ensure_indexes(self):
        """Back the registration pre-check with a unique index on email"""
        self.users.create_index("email", unique=True)

    def register(self, register_data: RegisterRequest) -> MessageResponse:
        """Register a new user"""
        if self.users.find_one({"email": register_data.email}):
            raise HTTPException(status_code=400, detail="User already exists")

        try:
            self.users.insert_one({
                "name": register_data.name,
                "email": register_data.email,
                "password": hash_password(register_data.password),
            })
        except DuplicateKeyError:
            # lost the race against a concurrent registration
            raise HTTPException(status_code=400, detail="User already exists")

        logger.info("Registered user %s", register_data.email)
        return MessageResponse(success=True, message="User registered successfully")

    def login(self, login_data: LoginRequest) -> TokenResponse:
        """Check credentials and issue a signed token"""
        user = self.users.find_one({"email": login_data.email})
        if not user or not user.get("password") or not verify_password(login_data.password, user["password"]):
            logger.info("Failed login for %s", login_data.email)
            raise HTTPException(status_code=401, detail="Invalid email or password")

        return TokenResponse(token=create_access_token(user["email"]))
