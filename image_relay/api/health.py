"""
Health check и диагностические эндпоинты
"""
import logging
from datetime import datetime, timezone
from fastapi import APIRouter

from image_relay.config import settings
from image_relay.schemas.relay import DetailedHealthResponse, HealthResponse
from image_relay.utils.constants import ALLOWED_IMAGE_HOSTS, SERVICE_NAME, SERVICE_VERSION

logger = logging.getLogger(__name__)

router = APIRouter()


def iso_timestamp() -> str:
    """Текущее время UTC в ISO-8601 с миллисекундами: 2026-01-01T12:00:00.123Z"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Проверка работоспособности API"
)
async def health_check() -> HealthResponse:
    """Health check эндпоинт для мониторинга доступности сервиса"""
    return HealthResponse(status="ok", timestamp=iso_timestamp())


@router.get(
    "/health/detailed",
    response_model=DetailedHealthResponse,
    summary="Детальная проверка здоровья",
    description="Проверка работоспособности и текущей конфигурации прокси"
)
async def detailed_health_check() -> DetailedHealthResponse:
    """
    Детальная проверка здоровья

    Показывает:
    - Список разрешённых источников и режим проверки host
    - Таймаут запроса к источнику
    - Адрес сервера
    """
    return DetailedHealthResponse(
        status="ok",
        timestamp=iso_timestamp(),
        service=SERVICE_NAME,
        version=SERVICE_VERSION,
        components={
            "allow_list": {
                "hosts": list(ALLOWED_IMAGE_HOSTS),
                "match": "suffix" if settings.strict_host_check else "substring",
            },
            "upstream": {
                "timeout": settings.upstream_timeout,
                "status": "ok" if settings.upstream_timeout else "no_timeout",
            },
            "server": {
                "host": settings.host,
                "port": settings.port,
                "status": "ok",
            },
        },
    )
