# Environment variables
ENV_BASE_URL = "SWAGCLIENT_BASE_URL"

# Headers
HEADER_CONTENT_TYPE = "Content-Type"

# Base request params
DEFAULT_CREDENTIALS = "same-origin"
DEFAULT_REDIRECT = "follow"
DEFAULT_REFERRER_POLICY = "no-referrer"

LOGGER_NAME = "swagclient"
