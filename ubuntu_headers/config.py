"""Configuration and logging setup for the Ubuntu kernel headers resolver."""

import logging
import os
import sys


def setup_logging(level: str | None = None) -> None:
    """Set up logging of mirror probing and resolution results on stdout.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to INFO.
    """
    log_level = level or os.getenv(ENV_LOG_LEVEL, "INFO")

    # Configure root logger
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # One line per probed URL is too much at INFO
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)


def get_env_var(name: str, default: str | None = None, required: bool = False) -> str:
    """Get environment variable with optional default and validation.

    Args:
        name: Environment variable name
        default: Default value if not set
        required: Whether the variable is required

    Returns:
        Environment variable value

    Raises:
        ValueError: If required variable is not set
    """
    value = os.getenv(name, default)

    if required and not value:
        raise ValueError(f"Required environment variable {name} is not set")

    return value or ""


# Environment variable names
ENV_LOG_LEVEL = "LOG_LEVEL"
ENV_MIRROR_CONFIG = "HEADERS_MIRROR_CONFIG"
ENV_HTTP_TIMEOUT = "HEADERS_HTTP_TIMEOUT"
ENV_KERNEL_RELEASE = "KERNEL_RELEASE"
ENV_KERNEL_VERSION = "KERNEL_VERSION"
ENV_KERNEL_ARCH = "KERNEL_ARCH"

DEFAULT_HTTP_TIMEOUT = 10
