"""
Visitor submissions: contact form, newsletter subscription and chat transcript lines.
"""

from fastapi import APIRouter, HTTPException, Query

from api.database import get_db
from api.models.content import ChatMessageRequest, ContactRequest, SubscribeRequest
from db.chat import record_message
from db.messages import create_message
from i18n import translate

router = APIRouter(prefix="/api", tags=["contact"])

_LANG = Query('en', pattern="^(id|en)$")


def _check_email(email):
    email = email.strip()
    if '@' not in email or email.startswith('@') or email.endswith('@'):
        raise HTTPException(status_code=400, detail="Invalid email address")
    return email


@router.post("/contact", status_code=201)
def submit_contact(body: ContactRequest, lang: str = _LANG):
    """Store a contact form message for the admin inbox."""
    email = _check_email(body.email)
    with get_db() as conn:
        message = create_message(
            conn, body.name.strip(), email, body.message.strip(),
            phone=(body.phone or '').strip() or None,
        )
    return {'success': True, 'id': message['id'], 'message': translate('contact.sent', lang)}


@router.post("/subscribe", status_code=201)
def subscribe(body: SubscribeRequest, lang: str = _LANG):
    """Newsletter sign-up, stored as a 'subscribe' message."""
    email = _check_email(body.email)
    with get_db() as conn:
        message = create_message(
            conn,
            translate('contact.newsletter_name', 'en'),
            email,
            translate('contact.newsletter_message', 'en', email=email),
            message_type='subscribe',
        )
    return {'success': True, 'id': message['id'], 'message': translate('contact.subscribed', lang)}


@router.post("/chat/messages", status_code=201)
def add_chat_message(body: ChatMessageRequest):
    """Append one line to a chat transcript (written by the website assistant)."""
    with get_db() as conn:
        message = record_message(conn, body.session_id, body.role, body.content, body.metadata)
    return message
