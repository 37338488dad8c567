"""Unit tests for hashing utilities."""

from civjobs.utils.hashing import cache_key, hash_string


class TestHashString:
    """Tests for hash_string function."""

    def test_hash_string_basic(self):
        """Test basic string hashing."""
        result = hash_string("test string")

        # Should return a 64-character hex string (SHA256)
        assert len(result) == 64
        assert all(c in "0123456789abcdef" for c in result)

    def test_hash_string_deterministic(self):
        assert hash_string("test") == hash_string("test")

    def test_hash_string_unicode(self):
        """Test that unicode strings hash differently from their ASCII look-alikes."""
        assert hash_string("café") != hash_string("cafe")


class TestCacheKey:
    """Tests for cache_key function."""

    def test_namespace_prefix(self):
        key = cache_key("search", "sheriff jobs")

        assert key.startswith("search:")
        assert len(key) == len("search:") + 64

    def test_case_and_whitespace_insensitive(self):
        assert cache_key("search", "  Sheriff   JOBS ") == cache_key("search", "sheriff jobs")

    def test_namespaces_do_not_collide(self):
        assert cache_key("search", "kern") != cache_key("job", "kern")

    def test_part_boundaries_matter(self):
        """Test that the same words split across parts give a different key."""
        key1 = cache_key("job", "kern|00001", "salary range")
        key2 = cache_key("job", "kern|00001 salary", "range")

        assert key1 != key2
