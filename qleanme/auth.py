import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from .config import ACCESS_TOKEN_EXPIRE_MINUTES, JWT_ALGORITHM, SECRET_KEY
from .database import get_db
from .models import User, Worker

logger = logging.getLogger(__name__)

security = HTTPBearer()

ACCOUNT_USER = "user"
ACCOUNT_WORKER = "worker"
ACCOUNT_NEW_USER = "new_user"


def create_access_token(phone_number: str, account_type: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Issue a session token after phone verification.

    The subject is the verified E.164 phone number; account_type is the role
    the number resolved to at verification time.
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    payload = {
        "sub": phone_number,
        "account_type": account_type,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(payload, SECRET_KEY, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[JWT_ALGORITHM])
    except JWTError as e:
        logger.warning(f"❌ Token rejected: {str(e)}")
        raise HTTPException(status_code=401, detail="Invalid or expired session. Please log in again.") from e

    if not payload.get("sub"):
        logger.warning("❌ Token missing subject")
        raise HTTPException(status_code=401, detail="Invalid or expired session. Please log in again.")
    return payload


async def get_token_payload(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> dict:
    return decode_access_token(credentials.credentials)


async def get_current_phone(payload: dict = Depends(get_token_payload)) -> str:
    """Verified phone number of the caller, registered or not"""
    return payload["sub"]


async def get_current_user(
    phone_number: str = Depends(get_current_phone),
    db: Session = Depends(get_db),
) -> User:
    user = db.query(User).filter(User.phone_number == phone_number).first()
    if not user:
        logger.warning(f"⚠️ No customer account for verified phone {phone_number}")
        raise HTTPException(status_code=401, detail="User not found. Please log in again.")
    return user


async def get_current_worker(
    phone_number: str = Depends(get_current_phone),
    db: Session = Depends(get_db),
) -> Worker:
    worker = db.query(Worker).filter(Worker.phone_number == phone_number).first()
    if not worker:
        logger.warning(f"⚠️ No worker account for verified phone {phone_number}")
        raise HTTPException(status_code=403, detail="Worker account required")
    return worker
