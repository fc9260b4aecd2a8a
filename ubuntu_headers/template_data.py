"""Build script parameters for resolved Ubuntu kernel headers."""

from ubuntu_headers.extraversion import parse_extraversion
from ubuntu_headers.models import KernelRelease, TemplateData

# hwe kernels are published under /linux-hwe but unpack into "generic" dirs
HWE_FLAVOR = "hwe"
HWE_HEADERS_PATTERN = "linux-headers*generic"


def headers_pattern_for(flavor: str) -> str:
    """Return the glob matching the directory unpacked from the headers .deb.

    Composite flavors such as "lowlatency-hwe" only keep their first part in
    the directory name.

    Examples:
        >>> headers_pattern_for("hwe")
        'linux-headers*generic'
        >>> headers_pattern_for("lowlatency-hwe")
        'linux-headers*lowlatency*'
    """
    if flavor == HWE_FLAVOR:
        return HWE_HEADERS_PATTERN
    return f"linux-headers*{flavor.split('-')[0]}*"


def build_template_data(release: KernelRelease, urls: list[str]) -> TemplateData:
    """Assemble the build script parameters for a resolved release.

    Args:
        release: Kernel release the URLs were resolved for
        urls: Resolved header package URLs, in resolver order

    Returns:
        TemplateData for the build script

    Raises:
        ExtraversionParseError: If the release extraversion cannot be parsed
    """
    _, flavor = parse_extraversion(release.extraversion)

    return TemplateData(
        download_urls=tuple(urls),
        local_version=release.full_extraversion,
        headers_pattern=headers_pattern_for(flavor),
    )
