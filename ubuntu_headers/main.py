"""Entry point for resolving Ubuntu kernel headers build parameters."""

import json
import logging
from typing import Any

import yaml

from ubuntu_headers.config import (
    DEFAULT_HTTP_TIMEOUT,
    ENV_HTTP_TIMEOUT,
    ENV_KERNEL_ARCH,
    ENV_KERNEL_RELEASE,
    ENV_KERNEL_VERSION,
    get_env_var,
    setup_logging,
)
from ubuntu_headers.config_manager import MirrorConfig
from ubuntu_headers.exceptions import (
    PackagesNotFoundError,
    ResolverTransportError,
)
from ubuntu_headers.models import KernelRelease
from ubuntu_headers.resolver import resolve_template_data
from ubuntu_headers.url_resolver import HTTPURLResolver, URLResolver

logger = logging.getLogger(__name__)


def handler(
    event: dict[str, Any], context: Any = None, url_resolver: URLResolver | None = None
) -> dict[str, Any]:
    """Resolve the headers build parameters for the release in an event.

    Args:
        event: Event data with "kernel_release", "kernel_version" and an
            optional "architecture" (default "amd64")
        context: Invocation context, unused
        url_resolver: Existence check override. Defaults to HTTP HEAD probing.

    Returns:
        Response dictionary with status code and body. A successful body is
        the JSON encoded build script variables.
    """
    setup_logging()

    try:
        kernel_release = event["kernel_release"]
        kernel_version = event["kernel_version"]
        release = KernelRelease.from_string(
            kernel_release, event.get("architecture", "amd64")
        )
    except KeyError as e:
        logger.error(f"Missing required event field: {e}")
        return {"statusCode": 400, "body": f"Missing required field: {e}"}
    except ValueError as e:
        logger.error(f"Invalid kernel release: {e}")
        return {"statusCode": 400, "body": str(e)}

    try:
        mirror_config = MirrorConfig.from_env()
        if url_resolver is None:
            timeout = float(get_env_var(ENV_HTTP_TIMEOUT, str(DEFAULT_HTTP_TIMEOUT)))
            url_resolver = HTTPURLResolver(timeout=timeout)
    except (OSError, yaml.YAMLError, ValueError) as e:
        logger.error(f"Invalid resolver configuration: {e}")
        return {"statusCode": 500, "body": f"Invalid configuration: {e}"}

    logger.info(
        f"Resolving headers for {kernel_release} ({release.architecture}), "
        f"package version {kernel_version}"
    )

    try:
        template_data = resolve_template_data(
            release, kernel_version, url_resolver, mirror_config
        )
    except PackagesNotFoundError as e:
        logger.error(f"{e} for {kernel_release}, tried: {e.mirror_bases}")
        return {"statusCode": 404, "body": str(e)}
    except ResolverTransportError as e:
        logger.error(f"Mirror check failed: {e}")
        return {"statusCode": 502, "body": str(e)}
    except ValueError as e:
        logger.error(f"Invalid kernel release: {e}")
        return {"statusCode": 400, "body": str(e)}

    return {"statusCode": 200, "body": json.dumps(template_data.as_dict())}


def main():
    """Local development entry point."""
    event = {
        "kernel_release": get_env_var(ENV_KERNEL_RELEASE, required=True),
        "kernel_version": get_env_var(ENV_KERNEL_VERSION, required=True),
        "architecture": get_env_var(ENV_KERNEL_ARCH, "amd64"),
    }

    result = handler(event)
    logger.info(f"Result: {result}")


if __name__ == "__main__":
    main()
