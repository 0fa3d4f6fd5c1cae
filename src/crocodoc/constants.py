"""
Constants and configuration values for the Crocodoc client.

This module contains the API endpoints, timeouts, retry settings and logging
values used throughout the package.
"""

# Crocodoc API URLs
CROCODOC_API_BASE_URL = "https://crocodoc.com/api/v2"
DOWNLOAD_API_PATH = "/download/"

# Download sub-resources
RESOURCE_DOCUMENT = "document"
RESOURCE_TEXT = "text"
RESOURCE_THUMBNAIL = "thumbnail"

# Network timeouts (in seconds)
DEFAULT_REQUEST_TIMEOUT = 30

# Retry settings applied by the transport's urllib3 Retry policy
DEFAULT_CONNECT_RETRIES = 3
DEFAULT_BACKOFF_FACTOR = 0.3
RETRY_STATUS_FORCELIST = (429, 500, 502, 503, 504)

# Error codes for HTTP 4xx responses the API documents
HTTP_4XX_ERROR_CODES = {
    400: "bad_request",
    401: "unauthorized",
    404: "not_found",
    405: "method_not_allowed",
}

# Configuration
CONFIG_FILE_NAME = "crocodoc.yaml"
APP_NAME = "crocodoc"

# Logging configuration
LOGGER_NAME = "crocodoc"
LOG_FILE_NAME = "crocodoc.log"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
INFO_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DEBUG_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s: %(message)s"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_FILE_BACKUP_COUNT = 5

# Environment variable names
LOG_LEVEL_ENV_VAR = "CROCODOC_LOG_LEVEL"
API_TOKEN_ENV_VAR = "CROCODOC_API_TOKEN"
