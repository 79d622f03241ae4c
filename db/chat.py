"""
Chat transcript (chat_memory) table access.

Transcripts are written by the website chat assistant; the admin panel
reads them grouped by session.
"""

import json
from datetime import datetime, timezone

from db.records import row_to_dict, utc_now

PREVIEW_LENGTH = 100
NO_MESSAGE = 'Tidak ada pesan'
UNKNOWN_NAME = 'Tidak diketahui'
NO_EMAIL = 'Tidak ada email'


def _to_message(row):
    return row_to_dict(row, json_fields={'metadata': {}})


def _parse_timestamp(value):
    """Parse an ISO timestamp; naive values are treated as UTC."""
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def record_message(conn, session_id, role, content, metadata=None):
    cursor = conn.execute(
        "INSERT INTO chat_memory (session_id, role, content, metadata, created_at) VALUES (?, ?, ?, ?, ?)",
        (session_id, role, content, json.dumps(metadata or {}), utc_now()),
    )
    conn.commit()
    row = conn.execute("SELECT * FROM chat_memory WHERE id = ?", (cursor.lastrowid,)).fetchone()
    return _to_message(row)


def list_sessions(conn):
    """Group all transcript lines into per-session summaries, newest activity first."""
    rows = conn.execute(
        "SELECT session_id, role, content, metadata, created_at FROM chat_memory "
        "ORDER BY created_at DESC, id DESC"
    ).fetchall()

    sessions = {}
    for row in rows:
        msg = _to_message(row)
        metadata = msg['metadata'] if isinstance(msg['metadata'], dict) else {}
        entry = sessions.get(msg['session_id'])
        if entry is None:
            sessions[msg['session_id']] = {
                'messages': [msg],
                'metadata': metadata,
                'last_activity': msg['created_at'] or utc_now(),
            }
            continue
        entry['messages'].append(msg)
        # Newest metadata carrying an email wins
        if metadata.get('email') and not entry['metadata'].get('email'):
            entry['metadata'] = metadata

    summaries = []
    for session_id, entry in sessions.items():
        # Messages are newest first, so the first user message is the latest one
        user_messages = [m for m in entry['messages'] if m['role'] == 'user']
        latest = user_messages[0]['content'] if user_messages else NO_MESSAGE
        preview = latest[:PREVIEW_LENGTH] + ('...' if len(latest) > PREVIEW_LENGTH else '')
        summaries.append({
            'session_id': session_id,
            'user_name': entry['metadata'].get('name') or UNKNOWN_NAME,
            'user_email': entry['metadata'].get('email') or NO_EMAIL,
            'latest_message': preview,
            'created_at': entry['last_activity'],
            'message_count': len(entry['messages']),
        })

    epoch = datetime.min.replace(tzinfo=timezone.utc)
    summaries.sort(key=lambda s: _parse_timestamp(s['created_at']) or epoch, reverse=True)
    return summaries


def list_session_messages(conn, session_id):
    """All lines of one session in chronological order."""
    rows = conn.execute(
        "SELECT * FROM chat_memory WHERE session_id = ? ORDER BY created_at ASC, id ASC",
        (session_id,),
    ).fetchall()
    return [_to_message(r) for r in rows]


def get_dashboard_stats(conn, now=None):
    """Conversation, lead and today's-message counts for the admin dashboard."""
    rows = conn.execute("SELECT session_id, metadata, created_at FROM chat_memory").fetchall()
    now = now or datetime.now(timezone.utc)
    start_of_day = now.replace(hour=0, minute=0, second=0, microsecond=0)

    sessions = set()
    emails = set()
    today_messages = 0
    for row in rows:
        msg = _to_message(row)
        sessions.add(msg['session_id'])
        metadata = msg['metadata'] if isinstance(msg['metadata'], dict) else {}
        if metadata.get('email'):
            emails.add(metadata['email'])
        created = _parse_timestamp(msg['created_at'])
        if created is not None and created >= start_of_day:
            today_messages += 1

    return {
        'total_conversations': len(sessions),
        'total_leads': len(emails),
        'today_messages': today_messages,
    }
