"""
Главный роутер для объединения всех API endpoints
"""
from fastapi import APIRouter

from image_relay.api import health, proxy

router = APIRouter()

# Подключаем все роутеры (без префикса: пути /health, /proxy-image, /download-image)
router.include_router(health.router, tags=["health"])
router.include_router(proxy.router, tags=["proxy"])
