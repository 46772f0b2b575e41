"""Tests for the @omitting decorator."""

import pytest

from deepomit import BREAK, omitting


class TestOmitting:
    """Test the decorator wraps return values."""

    def test_strips_return_value(self):
        """Test the key is removed from what the function returns."""

        @omitting("__typename")
        def build(name):
            return {"__typename": "User", "name": name, "tags": [{"__typename": "Tag"}]}

        assert build("Ada") == {"name": "Ada", "tags": [{}]}

    def test_preserves_metadata(self):
        """Test functools.wraps keeps the function name and docstring."""

        @omitting("secret")
        def payload():
            """Build a payload."""
            return {}

        assert payload.__name__ == "payload"
        assert payload.__doc__ == "Build a payload."

    def test_forwards_keep(self):
        """Test the keep policy is passed through to omit_deep."""
        raw = {"secret": 1}

        @omitting("secret", keep=lambda path: BREAK if path == ("raw",) else None)
        def payload():
            return {"secret": 2, "raw": raw}

        result = payload()

        assert result == {"raw": {"secret": 1}}
        assert result["raw"] is raw

    def test_returns_same_object_when_clean(self):
        """Test a clean return value is passed through by reference."""
        data = {"a": 1}

        @omitting("secret")
        def payload():
            return data

        assert payload() is data

    def test_missing_key_argument(self):
        """Test using @omitting without a key is rejected."""
        with pytest.raises(TypeError):

            @omitting
            def payload():
                return {}
