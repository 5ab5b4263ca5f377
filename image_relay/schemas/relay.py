"""
Pydantic схемы для endpoints прокси изображений
"""
from typing import Any, Dict
from pydantic import BaseModel, Field


class DownloadImageRequest(BaseModel):
    """Схема запроса на скачивание изображения в base64"""
    # любое JSON значение, приводится к строке в обработчике
    imageUrl: Any = Field(None, description="URL изображения (openai.com или blob.core.windows.net)")


class DownloadImageResponse(BaseModel):
    """Схема ответа с изображением в виде data URI"""
    success: bool
    dataUri: str
    contentType: str
    size: int = Field(..., description="Размер изображения в байтах")


class ErrorResponse(BaseModel):
    """Схема ответа с ошибкой"""
    error: str


class HealthResponse(BaseModel):
    """Схема ответа health check"""
    status: str
    timestamp: str = Field(..., description="Время ответа в ISO-8601 (UTC)")


class DetailedHealthResponse(HealthResponse):
    """Схема детального health check"""
    service: str
    version: str
    components: Dict
