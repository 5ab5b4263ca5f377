"""
Конфигурация pytest
"""
import pytest
import os
from unittest.mock import MagicMock, patch

# Тестовые переменные окружения (до импорта приложения)
os.environ.setdefault('PORT', '3001')
os.environ.setdefault('LOG_LEVEL', 'INFO')


def make_upstream_response(status_code=200, reason='OK', content=b'', headers=None):
    """Мок ответа requests.get"""
    response = MagicMock()
    response.status_code = status_code
    response.reason = reason
    response.content = content
    response.headers = headers if headers is not None else {}
    return response


@pytest.fixture
def mock_upstream():
    """Мок requests.get в сервисе загрузки"""
    with patch('image_relay.services.fetch_service.requests.get') as mock_get:
        yield mock_get


@pytest.fixture
def png_bytes():
    """Минимальный PNG-заголовок и немного данных"""
    return b'\x89PNG\r\n\x1a\n' + bytes(range(64))
