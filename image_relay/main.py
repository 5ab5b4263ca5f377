"""
FastAPI приложение: прокси изображений OpenAI / Azure Blob для обхода CORS
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from image_relay.config import settings
from image_relay.api.router import router
from image_relay.utils.constants import SERVICE_NAME, SERVICE_VERSION

# Настройка логирования
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events: баннер при старте и сообщение при остановке"""
    # Startup
    logger.info("=" * 80)
    logger.info("🖼️  Image proxy server")
    logger.info("=" * 80)
    if settings.host == "0.0.0.0":
        logger.info(f"📡 Сервер запущен на http://0.0.0.0:{settings.port} (доступен по http://localhost:{settings.port})")
    else:
        logger.info(f"📡 Сервер запущен на http://{settings.host}:{settings.port}")
    logger.info(f"Health check: http://localhost:{settings.port}/health")
    if settings.upstream_timeout is None:
        logger.info("⏱️  Таймаут запроса к источнику не задан")
    if not settings.strict_host_check:
        logger.warning("⚠️ Источник проверяется по вхождению подстроки в hostname (STRICT_HOST_CHECK=false)")
    logger.info("=" * 80)
    yield
    # Shutdown
    logger.info("Сервер остановлен")


# Создаём FastAPI приложение
app = FastAPI(
    title=SERVICE_NAME,
    description="""
    Прокси для изображений, сгенерированных OpenAI, для обхода CORS ограничений браузера.

    ## Возможности

    * `GET /proxy-image` - отдаёт изображение как есть
    * `POST /download-image` - отдаёт изображение как data URI (base64) в JSON
    * Разрешены только источники openai.com и blob.core.windows.net

    ## Swagger документация

    Интерактивная документация доступна по адресу `/docs` (Swagger UI) или `/redoc` (ReDoc).
    """,
    version=SERVICE_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS middleware - разрешаем запросы с любого источника
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Подключаем роутеры
app.include_router(router)


def run():
    """Точка входа консольной команды image-relay"""
    import uvicorn
    uvicorn.run(
        "image_relay.main:app",
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
