"""
JWT authentication for the admin API.

Admin accounts live in the admin_profiles table; a successful login returns
a stateless bearer token carrying the admin id, email and role.
"""

import hmac
import hashlib
import os
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from api import config


# --- JWT TOKEN MANAGEMENT ---

_bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token."""
    to_encode = data.copy()
    expiry = expires_delta or timedelta(hours=config.SITE_CONFIG['jwt_expiry_hours'])
    to_encode['exp'] = datetime.now(timezone.utc) + expiry
    to_encode['iat'] = datetime.now(timezone.utc)
    return jwt.encode(to_encode, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    """Decode a JWT access token. Returns None if invalid or expired."""
    try:
        return jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])
    except jwt.InvalidTokenError:
        return None


def token_for_admin(admin: dict) -> str:
    """Issue a token for an admin_profiles row."""
    return create_access_token({
        'sub': str(admin['id']),
        'email': admin['email'],
        'role': admin.get('role') or 'admin',
        'display_name': admin.get('display_name') or '',
    })


# --- USER INFO FROM TOKEN ---

class CurrentUser:
    """Represents the authenticated admin."""
    __slots__ = ('admin_id', 'email', 'role', 'display_name')

    def __init__(self, admin_id, email='', role='admin', display_name=''):
        self.admin_id = admin_id
        self.email = email
        self.role = role
        self.display_name = display_name

    @property
    def is_admin(self):
        return self.role in ('admin', 'superadmin')


# --- DEPENDENCY INJECTION ---

async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
) -> Optional[CurrentUser]:
    """Extract the admin from the bearer token if present, without requiring auth."""
    if credentials is None:
        return None

    payload = decode_access_token(credentials.credentials)
    if payload is None or not payload.get('sub'):
        return None

    try:
        admin_id = int(payload['sub'])
    except (TypeError, ValueError):
        return None

    return CurrentUser(
        admin_id=admin_id,
        email=payload.get('email', ''),
        role=payload.get('role', 'admin'),
        display_name=payload.get('display_name', ''),
    )


async def require_authenticated(
    user: Optional[CurrentUser] = Depends(get_optional_user),
) -> CurrentUser:
    """Require a valid token. Raises 401 if absent or invalid."""
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


async def require_admin(
    user: CurrentUser = Depends(require_authenticated),
) -> CurrentUser:
    """Require admin access. Raises 403 for non-admin roles."""
    if not user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return user


# --- PASSWORD HASHING ---

def hash_password(password: str) -> str:
    """Hash a password using PBKDF2-HMAC-SHA256. Returns 'salt_hex:dk_hex'."""
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac('sha256', password.encode('utf-8'), salt, 100000)
    return f"{salt.hex()}:{dk.hex()}"


def verify_password(password: str, stored_hash: str) -> bool:
    """Verify a password against a stored 'salt_hex:dk_hex' hash."""
    try:
        salt_hex, dk_hex = stored_hash.split(':')
        salt = bytes.fromhex(salt_hex)
        expected_dk = bytes.fromhex(dk_hex)
        actual_dk = hashlib.pbkdf2_hmac('sha256', password.encode('utf-8'), salt, 100000)
        return hmac.compare_digest(actual_dk, expected_dk)
    except (ValueError, AttributeError):
        return False
