"""
Разбор URL изображения и проверка источника по списку разрешённых доменов
"""
from typing import Any, Iterable
from urllib.parse import urlsplit

from image_relay.utils.constants import (
    ALLOWED_IMAGE_HOSTS,
    ERROR_INVALID_IMAGE_SOURCE,
    ERROR_INVALID_URL_FORMAT,
    SCHEMES_REQUIRING_HOST,
)


class UrlValidationError(Exception):
    """Ошибка валидации URL (всегда отдаётся клиенту как 400)"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def parse_hostname(url: str) -> str:
    """
    Разбирает абсолютный URL и возвращает hostname в нижнем регистре

    Raises:
        UrlValidationError: если URL не является корректным абсолютным адресом
    """
    try:
        parts = urlsplit(url.strip())
        # обращение к port проверяет, что порт числовой и в допустимом диапазоне
        parts.port
    except ValueError:
        raise UrlValidationError(ERROR_INVALID_URL_FORMAT)

    if not parts.scheme:
        raise UrlValidationError(ERROR_INVALID_URL_FORMAT)

    hostname = parts.hostname or ""
    if parts.scheme.lower() in SCHEMES_REQUIRING_HOST and not hostname:
        raise UrlValidationError(ERROR_INVALID_URL_FORMAT)

    return hostname.lower()


def is_allowed_host(hostname: str, strict: bool = False,
                    allowed_hosts: Iterable[str] = ALLOWED_IMAGE_HOSTS) -> bool:
    """
    Проверяет hostname по списку разрешённых доменов

    По умолчанию достаточно вхождения подстроки, поэтому проходит и
    `notopenai.com.evil.org`. В строгом режиме hostname должен совпадать
    с доменом или быть его поддоменом.
    """
    if strict:
        return any(hostname == domain or hostname.endswith("." + domain)
                   for domain in allowed_hosts)
    return any(domain in hostname for domain in allowed_hosts)


def validate_image_url(url: str, strict: bool = False) -> str:
    """
    Проверяет URL изображения и возвращает его без пробелов по краям

    Именно возвращённую строку нужно передавать в запрос к источнику.

    Raises:
        UrlValidationError: некорректный URL или недопустимый источник
    """
    url = url.strip()
    hostname = parse_hostname(url)
    if not is_allowed_host(hostname, strict=strict):
        raise UrlValidationError(ERROR_INVALID_IMAGE_SOURCE)
    return url


def is_missing_value(value: Any) -> bool:
    """Пустое значение поля: None, false, 0, "" (списки и объекты не пустые)"""
    if isinstance(value, (list, dict)):
        return False
    return not value


def coerce_url_value(value: Any) -> str:
    """
    Приводит значение JSON поля к строке так же, как это делает JavaScript String()

    `["https://a"]` -> "https://a", `true` -> "true", `{}` -> "[object Object]"
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join(coerce_url_value(item) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)
