"""Unit tests for ubuntu_headers/utils.py - deduplicate_urls function."""

from ubuntu_headers.utils import deduplicate_urls


class TestDeduplicateUrls:
    def test_empty_list(self):
        assert deduplicate_urls([]) == []

    def test_no_duplicates_unchanged(self):
        urls = ["http://a/1.deb", "http://a/2.deb"]
        assert deduplicate_urls(urls) == urls

    def test_keeps_first_occurrence(self):
        urls = ["http://b", "http://a", "http://b", "http://c", "http://a"]
        assert deduplicate_urls(urls) == ["http://b", "http://a", "http://c"]

    def test_all_duplicates(self):
        assert deduplicate_urls(["http://a"] * 5) == ["http://a"]

    def test_accepts_generator(self):
        assert deduplicate_urls(u for u in ["x", "x", "y"]) == ["x", "y"]
