"""
API endpoints для проксирования изображений (обход CORS в браузере)
"""
import base64
import logging
from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse, Response

from image_relay.config import settings
from image_relay.schemas.relay import DownloadImageRequest, DownloadImageResponse, ErrorResponse
from image_relay.services.fetch_service import FetchSuccess, TransportFailure, fetch_image
from image_relay.utils.constants import (
    ERROR_DOWNLOAD_FAILED,
    ERROR_MISSING_IMAGE_URL,
    ERROR_MISSING_URL_PARAM,
    ERROR_PROXY_FAILED,
    ERROR_UPSTREAM_PREFIX,
    PROXY_ALLOW_ORIGIN,
    PROXY_CACHE_CONTROL,
)
from image_relay.utils.url_validation import (
    UrlValidationError,
    coerce_url_value,
    is_missing_value,
    validate_image_url,
)

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Нет URL, некорректный URL или недопустимый источник"},
    500: {"model": ErrorResponse, "description": "Сетевая ошибка при загрузке изображения"},
}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def upstream_error_response(result: FetchSuccess) -> JSONResponse:
    """Пробрасывает статус источника клиенту"""
    logger.error(f"Failed to fetch image: {result.status_code} {result.reason}")
    return error_response(result.status_code, ERROR_UPSTREAM_PREFIX + result.reason)


@router.get(
    "/proxy-image",
    summary="Прокси изображений",
    description="Проксирует изображения из OpenAI и Azure Blob Storage для обхода CORS ограничений",
    response_class=Response,
    responses={
        200: {"content": {"image/png": {}}, "description": "Изображение как есть"},
        **ERROR_RESPONSES,
    },
)
def proxy_image(url: Optional[str] = Query(None, description="URL изображения для проксирования")):
    """
    Прокси для загрузки изображений (OpenAI/Azure Blob) для обхода CORS

    Разрешённые источники (вхождение в hostname):
    - openai.com
    - blob.core.windows.net

    **Пример:**
    ```
    GET /proxy-image?url=https://oaidalleapiprodscus.blob.core.windows.net/private/img.png
    ```

    Возвращает изображение с заголовками Cache-Control и Access-Control-Allow-Origin.
    """
    if not url:
        return error_response(400, ERROR_MISSING_URL_PARAM)

    try:
        url = validate_image_url(url, strict=settings.strict_host_check)
    except UrlValidationError as e:
        logger.warning(f"URL отклонён ({e.message}): {url!r}")
        return error_response(400, e.message)

    logger.info(f"Проксирование изображения: {url}")
    result = fetch_image(url, timeout=settings.upstream_timeout)

    if isinstance(result, TransportFailure):
        return error_response(500, ERROR_PROXY_FAILED)
    if not result.ok:
        return upstream_error_response(result)

    return Response(
        content=result.content,
        media_type=result.content_type,
        headers={
            'Cache-Control': PROXY_CACHE_CONTROL,
            'Access-Control-Allow-Origin': PROXY_ALLOW_ORIGIN,
        }
    )


@router.post(
    "/download-image",
    response_model=DownloadImageResponse,
    summary="Скачать изображение в base64",
    description="Загружает изображение и возвращает его как data URI в JSON",
    responses=ERROR_RESPONSES,
)
def download_image(request: Optional[DownloadImageRequest] = None):
    """
    Скачивание изображения и конвертация в data URI

    **Пример запроса:**
    ```json
    {
        "imageUrl": "https://cdn.openai.com/images/example.png"
    }
    ```

    **Ответ:**
    ```json
    {
        "success": true,
        "dataUri": "data:image/png;base64,iVBORw0KGgo...",
        "contentType": "image/png",
        "size": 12345
    }
    ```
    """
    raw_value = request.imageUrl if request else None
    if is_missing_value(raw_value):
        return error_response(400, ERROR_MISSING_IMAGE_URL)

    image_url = coerce_url_value(raw_value)
    try:
        image_url = validate_image_url(image_url, strict=settings.strict_host_check)
    except UrlValidationError as e:
        logger.warning(f"URL отклонён ({e.message}): {image_url!r}")
        return error_response(400, e.message)

    logger.info(f"Скачивание и конвертация изображения в base64: {image_url}")
    result = fetch_image(image_url, timeout=settings.upstream_timeout)

    if isinstance(result, TransportFailure):
        return error_response(500, ERROR_DOWNLOAD_FAILED)
    if not result.ok:
        return upstream_error_response(result)

    content_type = result.content_type
    encoded = base64.b64encode(result.content).decode('ascii')
    logger.info(f"Изображение сконвертировано в base64, размер: {result.size} байт")

    return DownloadImageResponse(
        success=True,
        dataUri=f"data:{content_type};base64,{encoded}",
        contentType=content_type,
        size=result.size,
    )
