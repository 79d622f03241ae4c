"""Pydantic models for visitor submissions, site settings and the content editor."""

from pydantic import BaseModel, Field
from typing import Literal, Optional

Language = Literal['id', 'en']


class ContactRequest(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    email: str = Field(min_length=3, max_length=200)
    phone: Optional[str] = None
    message: str = Field(min_length=1)


class SubscribeRequest(BaseModel):
    email: str = Field(min_length=3, max_length=200)


class ChatMessageRequest(BaseModel):
    session_id: str = Field(min_length=1)
    role: Literal['user', 'assistant', 'system'] = 'user'
    content: str = ''
    metadata: dict = {}


class LanguagePreferenceRequest(BaseModel):
    language: Language


class SettingsUpdate(BaseModel):
    whatsapp: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    tokopedia: Optional[str] = None
    shopee: Optional[str] = None
    instagram: Optional[str] = None
    facebook: Optional[str] = None
    use_database_products: Optional[bool] = None


class FeaturedContent(BaseModel):
    badge_id: str = ''
    badge_en: str = ''
    title_id: str = ''
    title_en: str = ''
    subtitle_id: str = ''
    subtitle_en: str = ''
    product_title_id: str = ''
    product_title_en: str = ''
    product_desc_id: str = ''
    product_desc_en: str = ''
    main_function_title_id: str = ''
    main_function_title_en: str = ''
    main_function_desc_id: str = ''
    main_function_desc_en: str = ''
    suitable_for_title_id: str = ''
    suitable_for_title_en: str = ''
    suitable_for_desc_id: str = ''
    suitable_for_desc_en: str = ''
    image_base64: str = ''
    linked_product_id: Optional[int] = None


class TranslateRequest(BaseModel):
    text: Optional[str] = None
    texts: Optional[dict[str, str]] = None
    source: Language
    target: Language


class AutoTranslateRequest(BaseModel):
    fields: dict[str, Optional[str]]
    source: Language = 'id'
    target: Language = 'en'
    overwrite: bool = False


class PreviewRequest(BaseModel):
    markdown: str = ''
    flavor: Literal['preview', 'storefront'] = 'preview'
