"""Parsing of Ubuntu kernel extraversion strings."""

import re

from ubuntu_headers.exceptions import ExtraversionParseError
from ubuntu_headers.models import ParsedExtraversion

DEFAULT_FLAVOR = "generic"

# Ubuntu flavors come as "generic", "generic-5" or "generic-5.15", and may
# themselves contain dashes ("intel-iotg-5.15")
FLAVOR_PATTERN = re.compile(r"^([a-z-]+[a-z])-*\d?.*$")


def parse_extraversion(extraversion: str) -> ParsedExtraversion:
    """Split an extraversion into its build number and flavor.

    The extraversion must come from a release string exactly as `uname -r`
    prints it. Without a "-" the whole string is the build number and the
    flavor is assumed to be "generic".

    Args:
        extraversion: Extraversion without leading separator (e.g., "188-generic")

    Returns:
        ParsedExtraversion with build number and flavor

    Raises:
        ExtraversionParseError: If the flavor part matches no known convention

    Examples:
        >>> parse_extraversion("188-generic")
        ParsedExtraversion(build_number='188', flavor='generic')
        >>> parse_extraversion("31-intel-iotg-5.15")
        ParsedExtraversion(build_number='31', flavor='intel-iotg')
    """
    if "-" not in extraversion:
        return ParsedExtraversion(extraversion, DEFAULT_FLAVOR)

    build_number, flavor_text = extraversion.split("-", 1)

    match = FLAVOR_PATTERN.match(flavor_text)
    if not match:
        raise ExtraversionParseError(extraversion)

    return ParsedExtraversion(build_number, match.group(1))
