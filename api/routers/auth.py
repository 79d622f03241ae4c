"""
Authentication router.

Handles admin login, auth status and the admin's own profile settings.
"""

import sqlite3
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from api.auth import (
    CurrentUser, get_optional_user, require_admin,
    hash_password, verify_password, token_for_admin,
)
from api.database import get_db
from api.models.auth import (
    LoginRequest, LoginResponse, AuthStatusResponse,
    ProfileUpdateRequest, PasswordChangeRequest, EmailChangeRequest,
)
from db.admins import (
    get_admin, get_admin_by_email,
    update_display_name, update_email, update_password_hash,
)

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _public_admin(admin):
    return {
        'admin_id': admin['id'],
        'email': admin['email'],
        'role': admin.get('role') or 'admin',
        'display_name': admin.get('display_name') or '',
    }


def _load_current_admin(conn, user):
    admin = get_admin(conn, user.admin_id)
    if not admin:
        raise HTTPException(status_code=404, detail="Admin account not found")
    return admin


@router.post("/login", response_model=LoginResponse)
def login(body: LoginRequest):
    """Authenticate with email + password and receive a JWT token."""
    with get_db() as conn:
        admin = get_admin_by_email(conn, body.email.strip())
    if not admin or not verify_password(body.password, admin['password_hash']):
        raise HTTPException(status_code=401, detail="Invalid credentials")
    return LoginResponse(access_token=token_for_admin(admin), user=_public_admin(admin))


@router.get("/status", response_model=AuthStatusResponse)
async def auth_status(user: Optional[CurrentUser] = Depends(get_optional_user)):
    """Get current authentication status."""
    if user is None:
        return AuthStatusResponse(authenticated=False)
    return AuthStatusResponse(
        authenticated=True,
        admin_id=user.admin_id,
        email=user.email,
        role=user.role,
        display_name=user.display_name,
    )


@router.get("/profile")
def get_profile(user: CurrentUser = Depends(require_admin)):
    with get_db() as conn:
        admin = _load_current_admin(conn, user)
    return _public_admin(admin)


@router.put("/profile")
def update_profile(body: ProfileUpdateRequest, user: CurrentUser = Depends(require_admin)):
    """Change the display name."""
    with get_db() as conn:
        _load_current_admin(conn, user)
        update_display_name(conn, user.admin_id, body.display_name.strip())
        admin = get_admin(conn, user.admin_id)
    return _public_admin(admin)


@router.put("/password")
def change_password(body: PasswordChangeRequest, user: CurrentUser = Depends(require_admin)):
    """Change the password; the current password must be supplied."""
    with get_db() as conn:
        admin = _load_current_admin(conn, user)
        if not verify_password(body.current_password, admin['password_hash']):
            raise HTTPException(status_code=400, detail="Current password is incorrect")
        update_password_hash(conn, user.admin_id, hash_password(body.new_password))
    return {'success': True}


@router.put("/email")
def change_email(body: EmailChangeRequest, user: CurrentUser = Depends(require_admin)):
    """Change the login email. Returns a fresh token carrying the new address."""
    new_email = body.email.strip()
    if '@' not in new_email:
        raise HTTPException(status_code=400, detail="Invalid email address")
    with get_db() as conn:
        admin = _load_current_admin(conn, user)
        if not verify_password(body.password, admin['password_hash']):
            raise HTTPException(status_code=400, detail="Password is incorrect")
        try:
            update_email(conn, user.admin_id, new_email)
        except sqlite3.IntegrityError:
            raise HTTPException(status_code=409, detail="Email already in use")
        admin = get_admin(conn, user.admin_id)
    return {'success': True, 'access_token': token_for_admin(admin), 'user': _public_admin(admin)}
