"""
Admin Authentication Service

Shared-secret gate for the admin endpoints. The secret can be sent directly
as a bearer credential, or exchanged once for a short-lived signed token so
clients don't need to keep the password around.

Tokens are signed with a key derived from ADMIN_TOKEN_SECRET and the admin
password: changing either one invalidates every token already issued. With
no ADMIN_TOKEN_SECRET configured, token login is disabled and only the
password itself is accepted.

When no admin password is configured the gate is open.
"""

import datetime
import hashlib
import hmac
from typing import Any, Dict, Optional

import jwt
from flask import current_app

TOKEN_ALGORITHM = "HS256"
TOKEN_SUBJECT = "admin"


class AdminService:
    """Checks admin credentials and issues admin tokens."""

    def __init__(self, admin_password: Optional[str], token_secret: Optional[str],
                 token_expiration_hours: int = 12):
        """
        Args:
            admin_password: Shared secret; None or blank disables the gate
            token_secret: Server-side key for admin tokens; None or blank
                disables token login
            token_expiration_hours: Lifetime of issued tokens
        """
        self.admin_password = (admin_password or "").strip()
        self.token_secret = (token_secret or "").strip()
        self.token_expiration_hours = token_expiration_hours

    @property
    def is_open(self) -> bool:
        """True when no password is configured (insecure default)."""
        return not self.admin_password

    @property
    def tokens_enabled(self) -> bool:
        return bool(self.token_secret)

    def _signing_key(self) -> str:
        return hmac.new(
            self.token_secret.encode('utf-8'),
            self.admin_password.encode('utf-8'),
            hashlib.sha256,
        ).hexdigest()

    def _password_matches(self, password: Optional[str]) -> bool:
        if not password or not isinstance(password, str):
            return False
        return hmac.compare_digest(password.encode('utf-8'), self.admin_password.encode('utf-8'))

    def login(self, password: Optional[str]) -> Dict[str, Any]:
        """
        Exchange the admin password for a signed token.

        Returns:
            Dictionary with success status and token, or error and error_type
            ("unavailable" when token login is disabled, else "unauthorized")
        """
        if not self.tokens_enabled:
            return {
                "success": False,
                "error_type": "unavailable",
                "error": "Token login is not configured",
            }

        if not self.is_open and not self._password_matches(password):
            return {"success": False, "error_type": "unauthorized", "error": "Invalid password"}

        now = datetime.datetime.now(datetime.timezone.utc)
        token_payload = {
            "sub": TOKEN_SUBJECT,
            "iat": now,
            "exp": now + datetime.timedelta(hours=self.token_expiration_hours),
        }
        token = jwt.encode(token_payload, self._signing_key(), algorithm=TOKEN_ALGORITHM)
        return {"success": True, "token": token, "expires_in_hours": self.token_expiration_hours}

    def verify_credential(self, credential: Optional[str]) -> Dict[str, Any]:
        """
        Check a bearer credential: either the password or an issued token.

        Returns:
            Dictionary with success status or error
        """
        if self.is_open:
            return {"success": True}

        if not credential:
            return {"success": False, "error": "Unauthorized"}

        if self._password_matches(credential):
            return {"success": True}

        if not self.tokens_enabled:
            return {"success": False, "error": "Unauthorized"}

        try:
            payload = jwt.decode(credential, self._signing_key(), algorithms=[TOKEN_ALGORITHM])
        except jwt.ExpiredSignatureError:
            return {"success": False, "error": "Token has expired"}
        except jwt.InvalidTokenError:
            return {"success": False, "error": "Unauthorized"}

        if payload.get("sub") != TOKEN_SUBJECT:
            return {"success": False, "error": "Unauthorized"}

        return {"success": True}


def get_admin_service() -> AdminService:
    """Admin service built from the current Flask app configuration."""
    return AdminService(
        current_app.config.get('ADMIN_PASSWORD'),
        current_app.config.get('ADMIN_TOKEN_SECRET'),
        current_app.config.get('ADMIN_TOKEN_EXPIRATION_HOURS', 12),
    )
