"""Utility functions for the Ubuntu kernel headers resolver."""

from collections.abc import Iterable


def deduplicate_urls(urls: Iterable[str]) -> list[str]:
    """Remove duplicate URLs while keeping the first occurrence of each.

    Different subdirectory and filename combinations can expand to the same
    literal URL, e.g. when the flavor directory equals the default one.

    Args:
        urls: URLs in probing order

    Returns:
        List of unique URLs in their original order

    Examples:
        >>> deduplicate_urls(["a", "b", "a", "c", "b"])
        ['a', 'b', 'c']
    """
    seen: set[str] = set()
    unique = []
    for url in urls:
        if url not in seen:
            seen.add(url)
            unique.append(url)
    return unique
