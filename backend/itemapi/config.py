import os
from typing import Optional

APP_VERSION = "0.1.0"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "info"
DEFAULT_ENV_FILE = ".env"

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def parse_port(raw) -> int:
    try:
        port = int(raw)
    except (TypeError, ValueError) as err:
        raise ValueError(f"Invalid port value: {raw!r}") from err
    if not 1 <= port <= 65535:
        raise ValueError(f"Port out of range (1-65535): {port}")
    return port


def resolve_port(cli_value: Optional[str] = None) -> int:
    raw = cli_value or os.getenv("PORT")
    if raw is None or str(raw).strip() == "":
        return DEFAULT_PORT
    return parse_port(str(raw).strip())


def resolve_host(cli_value: Optional[str] = None) -> str:
    return cli_value or os.getenv("ITEMAPI_HOST") or DEFAULT_HOST


def resolve_log_level(cli_value: Optional[str] = None) -> str:
    value = (cli_value or os.getenv("ITEMAPI_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().lower()
    if value not in LOG_LEVELS:
        raise ValueError(f"Unsupported log level: {value}")
    return value
