"""Unit tests for the config module.

WHY: The known-versions list comes from the environment. A typo there
must fail loudly instead of silently widening or narrowing what strict
decoding accepts.
"""

import pytest

from strfile_index.config import FLAG_MASK, PADDED_VERSION, load_known_versions


class TestLoadKnownVersions:

    def test_default_from_environment(self, monkeypatch):
        monkeypatch.delenv("STRFILE_KNOWN_VERSIONS", raising=False)
        assert load_known_versions() == frozenset({0, 2})

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("STRFILE_KNOWN_VERSIONS", "2,3")
        assert load_known_versions() == frozenset({2, 3})

    def test_blank_entries_ignored(self):
        assert load_known_versions(" 0, 2, ,") == frozenset({0, 2})

    def test_padded_sentinel_dropped(self):
        assert load_known_versions("1,2") == frozenset({2})

    def test_empty_string(self):
        assert load_known_versions("") == frozenset()

    def test_invalid_entry(self):
        with pytest.raises(ValueError, match="'two'"):
            load_known_versions("0,two")

    def test_negative_entry(self):
        with pytest.raises(ValueError, match="unsigned"):
            load_known_versions("-2")


def test_format_constants():
    assert PADDED_VERSION == 1
    assert FLAG_MASK == 0x1 | 0x2 | 0x4
