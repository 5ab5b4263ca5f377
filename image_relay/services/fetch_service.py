"""
Сервис загрузки изображения с удалённого источника
"""
import logging
from http import HTTPStatus
from typing import Optional, Union

import requests
from pydantic import BaseModel, Field
from requests.structures import CaseInsensitiveDict

from image_relay.utils.constants import DEFAULT_CONTENT_TYPE, UPSTREAM_USER_AGENT

logger = logging.getLogger(__name__)


class FetchSuccess(BaseModel):
    """Ответ источника (любой HTTP статус)"""
    status_code: int
    reason: str
    headers: CaseInsensitiveDict = Field(default_factory=CaseInsensitiveDict)
    content: bytes = b""

    class Config:
        arbitrary_types_allowed = True

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def content_type(self) -> str:
        return self.headers.get("content-type") or DEFAULT_CONTENT_TYPE

    @property
    def size(self) -> int:
        return len(self.content)


class TransportFailure(BaseModel):
    """Сетевая ошибка: DNS, соединение, таймаут, обрыв чтения тела"""
    cause: Exception

    class Config:
        arbitrary_types_allowed = True


FetchResult = Union[FetchSuccess, TransportFailure]


def status_text(response: requests.Response) -> str:
    """Текст статуса ответа; для HTTP/2 (без reason) берём стандартную фразу"""
    if response.reason:
        return response.reason
    try:
        return HTTPStatus(response.status_code).phrase
    except ValueError:
        return ""


def fetch_image(url: str, timeout: Optional[float] = None) -> FetchResult:
    """
    Загружает изображение целиком в память

    Исключения не пробрасываются: любая ошибка транспорта возвращается
    как TransportFailure, ответ с любым статусом как FetchSuccess.

    Args:
        url: Проверенный URL изображения
        timeout: Таймаут запроса в секундах (None = без таймаута)

    Returns:
        FetchSuccess или TransportFailure
    """
    try:
        response = requests.get(
            url,
            headers={"User-Agent": UPSTREAM_USER_AGENT},
            timeout=timeout,
        )
        return FetchSuccess(
            status_code=response.status_code,
            reason=status_text(response),
            headers=CaseInsensitiveDict(response.headers),
            content=response.content,
        )
    except Exception as e:
        logger.error(f"Ошибка при загрузке изображения {url}: {e}", exc_info=True)
        return TransportFailure(cause=e)
