"""Data models for the Ubuntu kernel headers resolver."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

# MAJOR.MINOR[.PATCH] followed by an optional suffix starting with a separator
KERNEL_RELEASE_PATTERN = re.compile(
    r"^(?P<fullversion>(?P<major>\d+)\.(?P<minor>\d+)(?:\.(?P<patch>\d+))?)"
    r"(?P<full_extraversion>[-.+].*)?$"
)


class Architecture(str, Enum):
    """Debian architecture tags supported by the Ubuntu mirrors."""

    AMD64 = "amd64"
    ARM64 = "arm64"

    @classmethod
    def from_string(cls, value: str) -> "Architecture":
        """Create an Architecture from a Debian tag or a `uname -m` name.

        Args:
            value: Architecture name (e.g., "amd64", "x86_64", "aarch64")

        Returns:
            Matching Architecture member

        Raises:
            ValueError: If the architecture is not supported
        """
        if not isinstance(value, str):
            raise ValueError(f"Unsupported architecture: {value!r}")

        normalized = UNAME_ALIASES.get(value.lower(), value.lower())
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unsupported architecture: {value}") from None

    def __str__(self) -> str:
        return self.value


UNAME_ALIASES = {
    "x86_64": "amd64",
    "aarch64": "arm64",
}


@dataclass(frozen=True)
class KernelRelease:
    """A kernel release as reported by `uname -r` on the target host."""

    major: int
    minor: int
    patch: int
    fullversion: str
    extraversion: str
    full_extraversion: str
    architecture: Architecture = Architecture.AMD64

    @classmethod
    def from_string(
        cls, release: str, architecture: str | Architecture = Architecture.AMD64
    ) -> "KernelRelease":
        """Create KernelRelease from a kernel release string.

        Args:
            release: Release string exactly as `uname -r` prints it
                (e.g., "5.15.0-188-generic")
            architecture: Target architecture tag or `uname -m` name

        Returns:
            Parsed KernelRelease

        Raises:
            ValueError: If the release string does not start with MAJOR.MINOR

        Examples:
            >>> kr = KernelRelease.from_string("5.15.0-188-generic")
            >>> kr.fullversion, kr.extraversion, kr.full_extraversion
            ('5.15.0', '188-generic', '-188-generic')
        """
        if not isinstance(release, str):
            raise ValueError(f"Invalid kernel release: {release!r}")

        match = KERNEL_RELEASE_PATTERN.match(release.strip())
        if not match:
            raise ValueError(f"Invalid kernel release: {release!r}")

        full_extraversion = match.group("full_extraversion") or ""

        if not isinstance(architecture, Architecture):
            architecture = Architecture.from_string(architecture)

        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch") or 0),
            fullversion=match.group("fullversion"),
            extraversion=full_extraversion[1:],
            full_extraversion=full_extraversion,
            architecture=architecture,
        )


class ParsedExtraversion(NamedTuple):
    """Build number and flavor extracted from a kernel extraversion."""

    build_number: str
    flavor: str


@dataclass(frozen=True)
class TemplateData:
    """Substitution variables for the kernel headers build script."""

    download_urls: tuple[str, ...]
    local_version: str
    headers_pattern: str

    def as_dict(self) -> dict[str, object]:
        """Return the variables under the names the build script expects."""
        return {
            "KernelDownloadURLS": list(self.download_urls),
            "KernelLocalVersion": self.local_version,
            "KernelHeadersPattern": self.headers_pattern,
        }
