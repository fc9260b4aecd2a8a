"""Selection of the mirror bases to probe for an architecture."""

from ubuntu_headers.config_manager import MirrorConfig
from ubuntu_headers.models import Architecture


def mirror_bases_for(
    architecture: Architecture, config: MirrorConfig | None = None
) -> list[str]:
    """Return the mirror bases to try, in probing order.

    amd64 packages live on the general mirror, with the security mirror as
    second choice for headers only published there. All other architectures
    are hosted on the ports mirror.

    Args:
        architecture: Target architecture
        config: Mirror hosts. Defaults to the public Ubuntu mirrors.

    Returns:
        Ordered list of mirror pool base URLs
    """
    config = config or MirrorConfig()

    if architecture == Architecture.AMD64:
        return [config.primary, config.security]

    return [config.ports]
