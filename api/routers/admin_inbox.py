"""
Admin inbox: contact messages, chat transcripts and dashboard counters.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.auth import CurrentUser, require_admin
from api.database import get_db
from db.chat import get_dashboard_stats, list_session_messages, list_sessions
from db.messages import count_unread, list_messages, mark_read, mark_replied

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.get("/messages")
def admin_list_messages(user: CurrentUser = Depends(require_admin)):
    """All contact and newsletter messages, newest first."""
    with get_db() as conn:
        return {'messages': list_messages(conn), 'unread': count_unread(conn)}


@router.put("/messages/{message_id}/read")
def admin_mark_read(message_id: int, user: CurrentUser = Depends(require_admin)):
    with get_db() as conn:
        updated = mark_read(conn, message_id)
    if not updated:
        raise HTTPException(status_code=404, detail="Message not found")
    return {'success': True}


@router.put("/messages/{message_id}/replied")
def admin_mark_replied(message_id: int, user: CurrentUser = Depends(require_admin)):
    with get_db() as conn:
        updated = mark_replied(conn, message_id)
    if not updated:
        raise HTTPException(status_code=404, detail="Message not found")
    return {'success': True}


@router.get("/chat/sessions")
def admin_chat_sessions(user: CurrentUser = Depends(require_admin)):
    with get_db() as conn:
        return {'sessions': list_sessions(conn)}


@router.get("/chat/sessions/{session_id}")
def admin_chat_session(session_id: str, user: CurrentUser = Depends(require_admin)):
    """Transcript of one session, oldest line first."""
    with get_db() as conn:
        messages = list_session_messages(conn, session_id)
    if not messages:
        raise HTTPException(status_code=404, detail="Chat session not found")
    return {'session_id': session_id, 'messages': messages}


@router.get("/dashboard/stats")
def admin_dashboard_stats(user: CurrentUser = Depends(require_admin)):
    with get_db() as conn:
        stats = get_dashboard_stats(conn)
        stats['unread_messages'] = count_unread(conn)
    return stats
