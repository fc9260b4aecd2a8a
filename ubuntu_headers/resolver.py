"""Resolution of Ubuntu kernel header package URLs across mirrors."""

import logging

from ubuntu_headers.candidates import generate_candidate_urls
from ubuntu_headers.config_manager import MirrorConfig
from ubuntu_headers.exceptions import PackagesNotFoundError
from ubuntu_headers.mirrors import mirror_bases_for
from ubuntu_headers.models import KernelRelease, TemplateData
from ubuntu_headers.template_data import build_template_data
from ubuntu_headers.url_resolver import HTTPURLResolver, URLResolver

logger = logging.getLogger(__name__)

# A common "_all" package and an architecture dependent package
REQUIRED_URLS = 2


def resolve_headers_urls(
    release: KernelRelease,
    kernel_version: str,
    url_resolver: URLResolver | None = None,
    mirror_config: MirrorConfig | None = None,
) -> list[str]:
    """Find the header package URLs for a kernel release.

    Mirror bases are tried in order and the first one where exactly
    REQUIRED_URLS candidates exist wins. Errors raised by the URL resolver
    are not caught, so a network failure stops the search.

    Args:
        release: Kernel release to find headers for
        kernel_version: Ubuntu package build tag embedded in filenames
        url_resolver: Callable returning the existing subset of candidate
            URLs. Defaults to HTTP HEAD probing.
        mirror_config: Mirror hosts. Defaults to the public Ubuntu mirrors.

    Returns:
        The resolved package URLs

    Raises:
        PackagesNotFoundError: If no mirror base holds the packages
        ResolverTransportError: If the default resolver hits a network error
        ExtraversionParseError: If the release extraversion cannot be parsed
    """
    if url_resolver is None:
        url_resolver = HTTPURLResolver()
    base_urls = mirror_bases_for(release.architecture, mirror_config)

    for base_url in base_urls:
        candidates = generate_candidate_urls(base_url, release, kernel_version)
        logger.info(f"Probing {len(candidates)} candidate URLs under {base_url}")

        urls = url_resolver(candidates)
        if len(urls) == REQUIRED_URLS:
            logger.info(f"Resolved kernel headers under {base_url}")
            return list(urls)

        logger.info(
            f"Found {len(urls)} of {REQUIRED_URLS} header packages under {base_url}"
        )

    logger.warning(
        f"Kernel headers not found for {release.fullversion}{release.full_extraversion}"
    )
    raise PackagesNotFoundError(base_urls)


def resolve_template_data(
    release: KernelRelease,
    kernel_version: str,
    url_resolver: URLResolver | None = None,
    mirror_config: MirrorConfig | None = None,
) -> TemplateData:
    """Resolve the header packages and build the script parameters."""
    urls = resolve_headers_urls(release, kernel_version, url_resolver, mirror_config)
    return build_template_data(release, urls)
