"""
Конфигурация приложения с использованием Pydantic Settings
"""
import logging
from typing import Optional

from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Загружаем переменные окружения из .env файла (если есть)
load_dotenv()

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Настройки приложения из переменных окружения"""

    # Server
    port: int = 3001
    host: str = "0.0.0.0"  # 0.0.0.0 для контейнера, 127.0.0.1 для локальной разработки
    log_level: str = "INFO"

    # Запрос к источнику изображения
    upstream_timeout: Optional[float] = None  # None = без таймаута, как в исходном сервисе
    strict_host_check: bool = False  # True = сравнение по суффиксу домена вместо подстроки

    class Config:
        env_file = ".env"
        case_sensitive = False
        env_file_encoding = 'utf-8'
        extra = 'ignore'


# Создаём экземпляр настроек
settings = Settings()
