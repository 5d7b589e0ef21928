# Constants
DEFAULT_ICON_NAME = "Document"
SECURE_ENDPOINT_NAME = "https"

SERVICE_URL_NOT_FOUND_MESSAGE = "Service URL not found"
FAILED_TO_OPEN_URL_PREFIX = "Failed to open URL: "

DEFAULT_COMMAND_TIMEOUT_SECONDS: float = 30.0

URL_LAUNCHER_TYPE = "webbrowser"
