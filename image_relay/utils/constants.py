"""
Константы проекта
"""
# Разрешённые источники изображений (проверяется вхождение подстроки в hostname)
ALLOWED_IMAGE_HOSTS = (
    "openai.com",
    "blob.core.windows.net",
)

# User-Agent для запросов к источнику изображения
UPSTREAM_USER_AGENT = "Mozilla/5.0 (compatible; ImageProxy/1.0)"

# Content-Type по умолчанию, если источник его не прислал
DEFAULT_CONTENT_TYPE = "image/png"

# Заголовки ответа прокси
PROXY_CACHE_CONTROL = "public, max-age=3600"  # 1 час
PROXY_ALLOW_ORIGIN = "*"

# Схемы, для которых host обязателен (как в WHATWG URL)
SCHEMES_REQUIRING_HOST = ("http", "https", "ftp", "ws", "wss")

# Тексты ошибок (часть контракта API, не переводить)
ERROR_MISSING_URL_PARAM = "Missing URL parameter"
ERROR_MISSING_IMAGE_URL = "Missing imageUrl in request body"
ERROR_INVALID_URL_FORMAT = "Invalid URL format"
ERROR_INVALID_IMAGE_SOURCE = "Invalid image source"
ERROR_UPSTREAM_PREFIX = "Failed to fetch image: "
ERROR_PROXY_FAILED = "Error fetching image"
ERROR_DOWNLOAD_FAILED = "Error downloading and converting image"

SERVICE_NAME = "Image Relay API"
SERVICE_VERSION = "1.0.0"
