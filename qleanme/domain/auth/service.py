"""Auth service - account type resolution and code verification"""

import logging
import secrets

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...auth import ACCOUNT_NEW_USER, ACCOUNT_USER, ACCOUNT_WORKER, create_access_token
from ...config import VERIFICATION_CODE
from ...models import User, Worker

logger = logging.getLogger(__name__)

NAVIGATION_TARGETS = {
    ACCOUNT_USER: "registered_user_dashboard",
    ACCOUNT_WORKER: "contractor_dashboard",
    ACCOUNT_NEW_USER: "registration",
}


class AuthService:
    """Phone based login: look the number up, send a code, verify it"""

    def __init__(self, db: Session):
        self.db = db

    def resolve_account(self, phone_number: str) -> tuple[str, str]:
        """
        Customers win over workers when a number is in both tables.

        Returns:
            Tuple of (account_type, message)
        """
        user = self.db.query(User).filter(User.phone_number == phone_number).first()
        if user:
            return ACCOUNT_USER, f"User found: {user.full_name}"

        worker = self.db.query(Worker).filter(Worker.phone_number == phone_number).first()
        if worker:
            return ACCOUNT_WORKER, f"Worker found: {worker.full_name} is a worker"

        return ACCOUNT_NEW_USER, "Opa! Something new"

    def send_code(self, phone_number: str) -> None:
        # No SMS provider is wired in; the configured code is always valid
        logger.info(f"📱 Verification code issued for {phone_number[:-4]}****")

    def login(self, phone_number: str) -> dict:
        account_type, message = self.resolve_account(phone_number)
        logger.info(f"🔐 Login attempt resolved to account_type={account_type}")
        self.send_code(phone_number)
        return {"phone_number": phone_number, "account_type": account_type, "message": message}

    def verify(self, phone_number: str, code: str) -> dict:
        if not secrets.compare_digest(code, VERIFICATION_CODE):
            logger.warning(f"❌ Incorrect verification code for {phone_number[:-4]}****")
            raise HTTPException(status_code=401, detail="Incorrect verification code")

        # Re-resolve: the account may have changed between login and verify
        account_type, _ = self.resolve_account(phone_number)
        logger.info(f"✅ Phone verified, account_type={account_type}")
        return {
            "phone_number": phone_number,
            "account_type": account_type,
            "navigation_target": NAVIGATION_TARGETS[account_type],
            "access_token": create_access_token(phone_number, account_type),
        }

    def resend(self, phone_number: str) -> dict:
        self.send_code(phone_number)
        return {"message": "Verification code resent"}
