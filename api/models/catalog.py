"""Pydantic models for catalog content (products, testimonials, videos)."""

from pydantic import BaseModel, Field
from typing import Optional


class ProductCreate(BaseModel):
    title_id: str = Field(min_length=1)
    title_en: str = Field(min_length=1)
    description_id: str = ''
    description_en: str = ''
    condition_id: str = 'Baru'
    condition_en: str = 'New'
    min_order_id: str = '1 Buah'
    min_order_en: str = '1 Unit'
    category_id: str = ''
    category_en: str = ''
    price: str = ''
    image_base64: str = ''
    thumbnails_base64: list[str] = []
    is_active: bool = True
    sort_order: int = 0
    slug: Optional[str] = None


class ProductUpdate(BaseModel):
    title_id: Optional[str] = None
    title_en: Optional[str] = None
    description_id: Optional[str] = None
    description_en: Optional[str] = None
    condition_id: Optional[str] = None
    condition_en: Optional[str] = None
    min_order_id: Optional[str] = None
    min_order_en: Optional[str] = None
    category_id: Optional[str] = None
    category_en: Optional[str] = None
    price: Optional[str] = None
    image_base64: Optional[str] = None
    thumbnails_base64: Optional[list[str]] = None
    is_active: Optional[bool] = None
    sort_order: Optional[int] = None
    slug: Optional[str] = None


class TestimonialCreate(BaseModel):
    name: str = Field(min_length=1)
    role_id: str = ''
    role_en: str = ''
    rating: int = Field(default=5, ge=1, le=5)
    comment_id: str = ''
    comment_en: str = ''
    is_active: bool = True
    sort_order: int = 0


class TestimonialUpdate(BaseModel):
    name: Optional[str] = None
    role_id: Optional[str] = None
    role_en: Optional[str] = None
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    comment_id: Optional[str] = None
    comment_en: Optional[str] = None
    is_active: Optional[bool] = None
    sort_order: Optional[int] = None


class VideoCreate(BaseModel):
    youtube_id: str = Field(min_length=1)
    title_id: str = Field(min_length=1)
    title_en: str = Field(min_length=1)
    description_id: str = ''
    description_en: str = ''
    is_active: bool = True
    sort_order: int = 0


class VideoUpdate(BaseModel):
    youtube_id: Optional[str] = None
    title_id: Optional[str] = None
    title_en: Optional[str] = None
    description_id: Optional[str] = None
    description_en: Optional[str] = None
    is_active: Optional[bool] = None
    sort_order: Optional[int] = None
