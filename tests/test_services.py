"""
Unit тесты для сервисов
"""
import pytest
import requests
from pydantic import BaseModel
from requests.structures import CaseInsensitiveDict

from image_relay.config import Settings
from image_relay.services.fetch_service import (
    FetchSuccess,
    TransportFailure,
    fetch_image,
)
from conftest import make_upstream_response


class TestFetchImage:
    """Тесты для fetch_image"""

    def test_fetch_success(self, mock_upstream, png_bytes):
        """Тест успешной загрузки"""
        mock_upstream.return_value = make_upstream_response(
            content=png_bytes, headers={'Content-Type': 'image/png'}
        )

        result = fetch_image("https://cdn.openai.com/a.png")

        assert isinstance(result, FetchSuccess)
        assert result.ok
        assert result.content == png_bytes
        assert result.size == len(png_bytes)
        assert result.content_type == 'image/png'

    def test_fetch_non_success_is_not_failure(self, mock_upstream):
        """Тест: HTTP ошибка источника - это ответ, а не сбой транспорта"""
        mock_upstream.return_value = make_upstream_response(status_code=500, reason='Internal Server Error')

        result = fetch_image("https://cdn.openai.com/a.png")

        assert isinstance(result, FetchSuccess)
        assert not result.ok
        assert result.reason == 'Internal Server Error'

    def test_fetch_unknown_status_without_reason(self, mock_upstream):
        """Тест нестандартного статуса без reason"""
        mock_upstream.return_value = make_upstream_response(status_code=599, reason=None)

        result = fetch_image("https://cdn.openai.com/a.png")

        assert result.reason == ''

    @pytest.mark.parametrize("error", [
        requests.ConnectionError("refused"),
        requests.Timeout("timed out"),
        requests.exceptions.ChunkedEncodingError("broken body"),
        ValueError("bad response"),
    ])
    def test_fetch_transport_failure(self, mock_upstream, error):
        """Тест: исключение превращается в TransportFailure"""
        mock_upstream.side_effect = error

        result = fetch_image("https://cdn.openai.com/a.png")

        assert isinstance(result, TransportFailure)
        assert result.cause is error

    def test_fetch_passes_timeout(self, mock_upstream):
        """Тест передачи таймаута"""
        mock_upstream.return_value = make_upstream_response()

        fetch_image("https://cdn.openai.com/a.png", timeout=2.5)

        assert mock_upstream.call_args.kwargs['timeout'] == 2.5


class TestFetchSuccess:
    """Тесты для FetchSuccess"""

    def test_default_content_type(self):
        """Тест Content-Type по умолчанию"""
        result = FetchSuccess(status_code=200, reason='OK')
        assert result.content_type == 'image/png'

    def test_content_type_case_insensitive(self):
        """Тест регистронезависимого заголовка"""
        result = FetchSuccess(status_code=200, reason='OK',
                              headers=CaseInsensitiveDict({'CONTENT-TYPE': 'image/gif'}))
        assert result.content_type == 'image/gif'

    def test_result_models(self):
        """Тест: результаты загрузки - pydantic модели, исключение хранится как есть"""
        error = requests.ConnectionError("refused")
        failure = TransportFailure(cause=error)

        assert isinstance(failure, BaseModel)
        assert failure.cause is error
        assert isinstance(FetchSuccess(status_code=200, reason='OK'), BaseModel)

    @pytest.mark.parametrize("status_code,ok", [(200, True), (204, True), (299, True), (304, False), (404, False)])
    def test_ok_range(self, status_code, ok):
        """Тест диапазона успешных статусов"""
        assert FetchSuccess(status_code=status_code, reason='').ok is ok


class TestSettings:
    """Тесты для настроек"""

    def test_defaults(self, monkeypatch):
        """Тест значений по умолчанию"""
        for name in ('PORT', 'HOST', 'UPSTREAM_TIMEOUT', 'STRICT_HOST_CHECK'):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.port == 3001
        assert settings.host == '0.0.0.0'
        assert settings.upstream_timeout is None
        assert settings.strict_host_check is False

    def test_from_env(self, monkeypatch):
        """Тест чтения из переменных окружения"""
        monkeypatch.setenv('PORT', '8080')
        monkeypatch.setenv('UPSTREAM_TIMEOUT', '15')
        monkeypatch.setenv('STRICT_HOST_CHECK', 'true')

        settings = Settings(_env_file=None)

        assert settings.port == 8080
        assert settings.upstream_timeout == 15.0
        assert settings.strict_host_check is True
