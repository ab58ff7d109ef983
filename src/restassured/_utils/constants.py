# Request defaults
DEFAULT_CONTENT_TYPE = "application/json"
DEFAULT_ENCODING = "utf-8"
DEFAULT_CONTROL_NAME = "file"
DEFAULT_TIMEOUT = 100.0

# Headers
HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"

# Environment variables
ENV_BASE_URI = "RESTASSURED_BASE_URI"
ENV_TIMEOUT = "RESTASSURED_TIMEOUT"
ENV_VERIFY_SSL = "RESTASSURED_VERIFY_SSL"
ENV_DEBUG = "RESTASSURED_DEBUG"
ENV_CA_BUNDLE = "RESTASSURED_CA_BUNDLE"
ENV_SSL_CERT_FILE = "SSL_CERT_FILE"
ENV_SSL_CERT_DIR = "SSL_CERT_DIR"
ENV_REQUESTS_CA_BUNDLE = "REQUESTS_CA_BUNDLE"

# Files
DOTENV_FILE = ".env"
