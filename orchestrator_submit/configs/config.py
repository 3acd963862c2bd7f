from dataclasses import dataclass
from typing import Optional
import os
import logging
import yaml
from dotenv import load_dotenv
from rich.logging import RichHandler
from rich.traceback import install as install_rich_traceback

from orchestrator_submit.models.connection import DEFAULT_HOST_ADDRESS, DEFAULT_PORT
from orchestrator_submit.models.work_order import DEFAULT_LOGIN, DEFAULT_PASSWORD

logger = logging.getLogger(__name__)


@dataclass
class Config:
    host_address: str = DEFAULT_HOST_ADDRESS
    host_port: int = DEFAULT_PORT
    use_tls: bool = False
    timeout: Optional[float] = None
    username: str = DEFAULT_LOGIN
    password: str = DEFAULT_PASSWORD
    log_request_body: bool = True
    log_response_body: bool = True
    log_pretty_print_body: bool = True
    debug: bool = True
    rich_logging: bool = True
    strict_additional_arguments: bool = False


def setup_logging(config: "Config") -> None:
    """Configure logging level based on ``config.debug``."""
    level = logging.DEBUG if config.debug else logging.INFO
    if config.rich_logging:
        install_rich_traceback()
        logging.basicConfig(
            level=level,
            format="%(name)s - %(message)s",
            handlers=[RichHandler(rich_tracebacks=True)],
        )
    else:
        logging.basicConfig(
            level=level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    logger.debug("Logging initialized at level %s", logging.getLevelName(level))
    # Suppress noisy connection pool output from the HTTP stack
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def load_config(path: str = None) -> Config:
    """Load configuration from YAML file and environment variables."""
    load_dotenv()
    logger.debug("Loading configuration from %s", path or "default config.yml")

    # If no path provided, use default relative to this config.py file
    if path is None:
        config_dir = os.path.dirname(os.path.abspath(__file__))
        path = os.path.join(config_dir, "config.yml")

    data = {}
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        logger.debug("Loaded YAML configuration from %s", path)

    defaults = Config()

    def _env_str(name: str, key: str, default: str) -> str:
        val = os.getenv(name)
        if val is None:
            return str(data.get(key, default))
        return val

    def _env_bool(name: str, key: str, default: bool) -> bool:
        val = os.getenv(name)
        if val is None:
            return bool(data.get(key, default))
        return val.lower() in {"1", "true", "yes", "on"}

    def _env_int(name: str, key: str, default: int) -> int:
        val = os.getenv(name)
        if val is None:
            return int(data.get(key, default))
        try:
            return int(val)
        except ValueError:
            return default

    def _env_float(name: str, key: str, default: Optional[float]) -> Optional[float]:
        val = os.getenv(name)
        if val is None:
            val = data.get(key, default)
        if val in (None, ""):
            return None
        try:
            return float(val)
        except (TypeError, ValueError):
            return default

    return Config(
        host_address=_env_str("ORCHESTRATOR_HOST_ADDRESS", "host_address", defaults.host_address),
        host_port=_env_int("ORCHESTRATOR_HOST_PORT", "host_port", defaults.host_port),
        use_tls=_env_bool("ORCHESTRATOR_USE_TLS", "use_tls", defaults.use_tls),
        timeout=_env_float("ORCHESTRATOR_TIMEOUT", "timeout", defaults.timeout),
        username=_env_str("ORCHESTRATOR_USERNAME", "username", defaults.username),
        password=_env_str("ORCHESTRATOR_PASSWORD", "password", defaults.password),
        log_request_body=_env_bool("LOG_REQUEST_BODY", "log_request_body", defaults.log_request_body),
        log_response_body=_env_bool("LOG_RESPONSE_BODY", "log_response_body", defaults.log_response_body),
        log_pretty_print_body=_env_bool(
            "LOG_PRETTY_PRINT_BODY", "log_pretty_print_body", defaults.log_pretty_print_body
        ),
        debug=_env_bool("DEBUG", "debug", defaults.debug),
        rich_logging=_env_bool("RICH_LOGGING", "rich_logging", defaults.rich_logging),
        strict_additional_arguments=_env_bool(
            "STRICT_ADDITIONAL_ARGUMENTS",
            "strict_additional_arguments",
            defaults.strict_additional_arguments,
        ),
    )
