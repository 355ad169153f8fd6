# Environment variables
ENV_ACCESS_TOKEN = "SUMUP_ACCESS_TOKEN"
ENV_BASE_URL = "SUMUP_BASE_URL"
ENV_DEBUG = "SUMUP_DEBUG"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"

HEADER_API_VERSION = "X-Sumup-Api-Version"
HEADER_LANG = "X-Sumup-Lang"
HEADER_PACKAGE_VERSION = "X-Sumup-Package-Version"
HEADER_OS = "X-Sumup-Os"
HEADER_ARCH = "X-Sumup-Arch"
HEADER_RUNTIME = "X-Sumup-Runtime"
HEADER_RUNTIME_VERSION = "X-Sumup-Runtime-Version"

# Content types
APPLICATION_JSON = "application/json"
APPLICATION_OCTET_STREAM = "application/octet-stream"

# Package
PACKAGE_NAME = "sumup"
PRODUCT_NAME = "sumup-python"
API_VERSION = "1.0.0"
DEFAULT_PACKAGE_VERSION = "0.0.0"

# Query literal emitted for explicitly null parameters
NULL_LITERAL = "null"
