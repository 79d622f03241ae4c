"""
Admin tutorial video management.
"""

import re

from fastapi import APIRouter, Depends, HTTPException

from api.auth import CurrentUser, require_admin
from api.database import get_db
from api.models.catalog import VideoCreate, VideoUpdate
from db.videos import create_video, delete_video, get_video, list_videos, update_video

router = APIRouter(prefix="/api/admin/videos", tags=["admin"])

# watch?v=ID, youtu.be/ID, /embed/ID, /shorts/ID
_YOUTUBE_URL = re.compile(r'(?:v=|youtu\.be/|/embed/|/shorts/)([A-Za-z0-9_-]{11})')


def youtube_id_from(value):
    """Accept either a bare video id or a YouTube URL."""
    value = value.strip()
    match = _YOUTUBE_URL.search(value)
    return match.group(1) if match else value


@router.get("")
def admin_list_videos(user: CurrentUser = Depends(require_admin)):
    with get_db() as conn:
        return {'videos': list_videos(conn)}


@router.post("", status_code=201)
def admin_create_video(body: VideoCreate, user: CurrentUser = Depends(require_admin)):
    values = body.model_dump()
    values['youtube_id'] = youtube_id_from(values['youtube_id'])
    with get_db() as conn:
        return create_video(conn, values)


@router.put("/{video_id}")
def admin_update_video(video_id: int, body: VideoUpdate, user: CurrentUser = Depends(require_admin)):
    values = body.model_dump(exclude_none=True)
    if 'youtube_id' in values:
        values['youtube_id'] = youtube_id_from(values['youtube_id'])
    with get_db() as conn:
        video = update_video(conn, video_id, values)
    if not video:
        raise HTTPException(status_code=404, detail="Video not found")
    return video


@router.delete("/{video_id}")
def admin_delete_video(video_id: int, user: CurrentUser = Depends(require_admin)):
    with get_db() as conn:
        deleted = delete_video(conn, video_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Video not found")
    return {'success': True}
