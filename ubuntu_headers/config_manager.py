"""Mirror host configuration for the Ubuntu kernel headers resolver."""

from dataclasses import dataclass
from pathlib import Path

import yaml

from ubuntu_headers.config import ENV_MIRROR_CONFIG, get_env_var

DEFAULT_PRIMARY_MIRROR = "https://mirrors.edge.kernel.org/ubuntu/pool/main/l"
DEFAULT_SECURITY_MIRROR = "http://security.ubuntu.com/ubuntu/pool/main/l"
DEFAULT_PORTS_MIRROR = "http://ports.ubuntu.com/ubuntu-ports/pool/main/l"


@dataclass(frozen=True)
class MirrorConfig:
    """Mirror pool bases to probe for header packages.

    Attributes:
        primary: General kernel mirror for amd64
        security: Security updates mirror for amd64, some headers are only
            published there
        ports: Ports mirror hosting every other architecture
    """

    primary: str = DEFAULT_PRIMARY_MIRROR
    security: str = DEFAULT_SECURITY_MIRROR
    ports: str = DEFAULT_PORTS_MIRROR

    @classmethod
    def from_yaml(cls, yaml_path: Path | str) -> "MirrorConfig":
        """Load mirror configuration from a YAML file.

        Keys that are absent keep their default mirror.

        Args:
            yaml_path: Path to the YAML configuration file

        Returns:
            MirrorConfig populated from the YAML file

        Raises:
            FileNotFoundError: If the YAML file does not exist
            ValueError: If the file or its "mirrors" entry is not a mapping, or a
                mirror is not a non-empty string
        """
        with open(yaml_path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Mirror configuration must be a mapping: {yaml_path}")

        mirrors = data.get("mirrors", data)
        if not isinstance(mirrors, dict):
            raise ValueError(
                f"Mirror configuration \"mirrors\" must be a mapping: {yaml_path}"
            )

        return cls(
            primary=_mirror_url(mirrors, "primary", DEFAULT_PRIMARY_MIRROR),
            security=_mirror_url(mirrors, "security", DEFAULT_SECURITY_MIRROR),
            ports=_mirror_url(mirrors, "ports", DEFAULT_PORTS_MIRROR),
        )

    @classmethod
    def from_env(cls) -> "MirrorConfig":
        """Load the YAML file named by HEADERS_MIRROR_CONFIG, or use defaults."""
        config_path = get_env_var(ENV_MIRROR_CONFIG)
        if not config_path:
            return cls()
        return cls.from_yaml(config_path)


def _mirror_url(mirrors: dict, key: str, default: str) -> str:
    url = mirrors.get(key, default)
    if not isinstance(url, str) or not url.strip("/"):
        raise ValueError(f"Mirror \"{key}\" must be a non-empty URL, got {url!r}")
    return url.rstrip("/")
