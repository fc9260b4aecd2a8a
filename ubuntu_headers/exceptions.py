"""Exceptions raised while resolving Ubuntu kernel header packages."""


class HeadersResolutionError(Exception):
    """Base class for kernel headers resolution errors."""


class ExtraversionParseError(HeadersResolutionError, ValueError):
    """The extraversion does not follow any known Ubuntu flavor naming."""

    def __init__(self, extraversion: str):
        self.extraversion = extraversion
        super().__init__(f"Unable to parse flavor from extraversion: {extraversion!r}")


class ResolverTransportError(HeadersResolutionError):
    """The URL existence check failed at the network level."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(message)


class PackagesNotFoundError(HeadersResolutionError):
    """No mirror base holds exactly the expected header packages."""

    def __init__(self, mirror_bases: list[str] | None = None):
        self.mirror_bases = list(mirror_bases or [])
        super().__init__("kernel headers not found")
