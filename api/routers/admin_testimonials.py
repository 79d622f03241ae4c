"""
Admin testimonial management.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.auth import CurrentUser, require_admin
from api.database import get_db
from api.models.catalog import TestimonialCreate, TestimonialUpdate
from db.testimonials import (
    create_testimonial, delete_testimonial, get_testimonial, list_testimonials, update_testimonial,
)

router = APIRouter(prefix="/api/admin/testimonials", tags=["admin"])


@router.get("")
def admin_list_testimonials(user: CurrentUser = Depends(require_admin)):
    with get_db() as conn:
        return {'testimonials': list_testimonials(conn)}


@router.get("/{testimonial_id}")
def admin_get_testimonial(testimonial_id: int, user: CurrentUser = Depends(require_admin)):
    with get_db() as conn:
        testimonial = get_testimonial(conn, testimonial_id)
    if not testimonial:
        raise HTTPException(status_code=404, detail="Testimonial not found")
    return testimonial


@router.post("", status_code=201)
def admin_create_testimonial(body: TestimonialCreate, user: CurrentUser = Depends(require_admin)):
    with get_db() as conn:
        return create_testimonial(conn, body.model_dump())


@router.put("/{testimonial_id}")
def admin_update_testimonial(testimonial_id: int, body: TestimonialUpdate,
                             user: CurrentUser = Depends(require_admin)):
    with get_db() as conn:
        testimonial = update_testimonial(conn, testimonial_id, body.model_dump(exclude_none=True))
    if not testimonial:
        raise HTTPException(status_code=404, detail="Testimonial not found")
    return testimonial


@router.delete("/{testimonial_id}")
def admin_delete_testimonial(testimonial_id: int, user: CurrentUser = Depends(require_admin)):
    with get_db() as conn:
        deleted = delete_testimonial(conn, testimonial_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Testimonial not found")
    return {'success': True}
