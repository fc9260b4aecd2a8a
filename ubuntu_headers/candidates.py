"""Candidate package URL generation for Ubuntu kernel headers.

Ubuntu mirrors only expose static directory trees, so there is no way to ask
which package holds the headers for a given kernel. Instead every known
directory layout and package naming convention is expanded into a URL and
the existing ones are found by probing.
"""

import logging

from ubuntu_headers.extraversion import DEFAULT_FLAVOR, parse_extraversion
from ubuntu_headers.models import KernelRelease
from ubuntu_headers.utils import deduplicate_urls

logger = logging.getLogger(__name__)

# Package naming conventions observed on Ubuntu mirrors. Every kernel needs an
# architecture dependent package and an "_all" package; which names they carry
# depends on the flavor and on when the kernel was published.
PACKAGE_NAME_PATTERNS = {
    # linux-headers-5.15.0-188-generic_5.15.0-188.198_amd64_all.deb
    "headers_all": (
        "linux-headers-{fullversion}{full_extraversion}"
        "_{fullversion}-{build_number}.{kernel_version}_{arch}_all.deb"
    ),
    # linux-headers-5.15.0-1051-aws_5.15.0-1051.56_amd64.deb
    "headers_flavor_arch": (
        "linux-headers-{fullversion}-{build_number}-{flavor}"
        "_{fullversion}-{build_number}.{kernel_version}_{arch}.deb"
    ),
    # linux-aws-headers-5.15.0-1051_5.15.0-1051.56_all.deb
    "flavor_headers_all": (
        "linux-{flavor}-headers-{fullversion}-{build_number}"
        "_{fullversion}-{build_number}.{kernel_version}_all.deb"
    ),
    # linux-headers-4.18.0-24-generic_4.18.0-24.25~18.04.1_amd64.deb
    "headers_arch": (
        "linux-headers-{fullversion}{full_extraversion}"
        "_{fullversion}-{build_number}.{kernel_version}_{arch}.deb"
    ),
}

# Generic kernels sometimes drop the flavor from the "_all" package name,
# other flavors never do.
GENERIC_PACKAGE_NAME_PATTERNS = {
    # linux-headers-5.15.0-188_5.15.0-188.198_all.deb
    "generic_headers_all": (
        "linux-headers-{fullversion}-{build_number}"
        "_{fullversion}-{build_number}.{kernel_version}_all.deb"
    ),
}


def candidate_subdirs(release: KernelRelease, flavor: str) -> list[str]:
    """Return the pool subdirectories that may hold a flavor's packages.

    Examples:
        linux                 default, holds generic and friends
        linux-aws             flavor specific
        linux-azure-5.15      flavor split by kernel series
    """
    return [
        "linux",
        f"linux-{flavor}",
        f"linux-{flavor}-{release.major}.{release.minor}",
    ]


def package_names(
    release: KernelRelease, kernel_version: str, build_number: str, flavor: str
) -> list[str]:
    """Expand every known naming convention for the release.

    Args:
        release: Kernel release to build package names for
        kernel_version: Ubuntu package build tag (e.g., "198" or "25~18.04.1")
        build_number: Build number parsed from the extraversion
        flavor: Flavor parsed from the extraversion

    Returns:
        Package filenames in convention order
    """
    patterns = list(PACKAGE_NAME_PATTERNS.values())
    if flavor == DEFAULT_FLAVOR:
        patterns.extend(GENERIC_PACKAGE_NAME_PATTERNS.values())

    fields = {
        "fullversion": release.fullversion,
        "full_extraversion": release.full_extraversion,
        "build_number": build_number,
        "flavor": flavor,
        "kernel_version": kernel_version,
        "arch": str(release.architecture),
    }
    return [pattern.format(**fields) for pattern in patterns]


def generate_candidate_urls(
    base_url: str, release: KernelRelease, kernel_version: str
) -> list[str]:
    """Build all plausible header package URLs below one mirror base.

    Args:
        base_url: Mirror pool base (e.g., "https://mirrors.edge.kernel.org/ubuntu/pool/main/l")
        release: Kernel release to find headers for
        kernel_version: Ubuntu package build tag embedded in filenames

    Returns:
        Deduplicated candidate URLs, subdirectory by subdirectory

    Raises:
        ExtraversionParseError: If the release extraversion cannot be parsed
    """
    build_number, flavor = parse_extraversion(release.extraversion)

    names = package_names(release, kernel_version, build_number, flavor)
    urls = [
        f"{base_url}/{subdir}/{name}"
        for subdir in candidate_subdirs(release, flavor)
        for name in names
    ]

    candidates = deduplicate_urls(urls)
    logger.debug(
        f"Generated {len(candidates)} candidate URLs under {base_url} "
        f"for flavor {flavor}"
    )
    return candidates
