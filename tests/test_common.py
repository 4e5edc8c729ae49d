"""Tests for common utilities."""

import pytest
from shortlinks.common.validators import is_reserved, is_valid_url, is_valid_abbreviation, validate_link
from shortlinks.common.url_builder import build_short_url, build_home_url, normalize_path_prefix
from shortlinks.database.models import Link


class TestValidators:
    """Test validation utilities."""
    
    def test_valid_urls(self):
        valid, _ = is_valid_url("https://example.com")
        assert valid
        
        valid, _ = is_valid_url("http://example.com/path")
        assert valid
        
        valid, _ = is_valid_url("https://sub.example.com:8080/path?query=value")
        assert valid
    
    def test_invalid_urls(self):
        valid, error = is_valid_url("")
        assert not valid
        assert "required" in error.lower()
        
        valid, error = is_valid_url("not-a-url")
        assert not valid
        
        valid, error = is_valid_url("ftp://example.com")
        assert not valid
        assert "http" in error.lower()
        
        valid, error = is_valid_url("https://")
        assert not valid
        assert "domain" in error.lower()
    
    def test_url_length_limit(self):
        valid, error = is_valid_url("https://example.com/" + "a" * 30, max_length=20)
        assert not valid
        assert "too long" in error.lower()
    
    def test_empty_abbreviation_is_valid(self):
        valid, _ = is_valid_abbreviation("")
        assert valid
    
    def test_valid_abbreviations(self):
        for abbreviation in ("cm", "abc123", "my-link", "my_link"):
            valid, _ = is_valid_abbreviation(abbreviation)
            assert valid, abbreviation
    
    def test_invalid_abbreviations(self):
        valid, error = is_valid_abbreviation("a" * 65)
        assert not valid
        assert "at most" in error.lower()
        
        valid, error = is_valid_abbreviation("abc@123")
        assert not valid
        
        valid, error = is_valid_abbreviation("with/slash")
        assert not valid
        
        valid, error = is_valid_abbreviation("API")
        assert not valid
        assert "reserved" in error.lower()
    
    @pytest.mark.parametrize("word", ["health", "API", "Css", "favicon.ico"])
    def test_reserved_words_ignore_case(self, word):
        assert is_reserved(word)
    
    def test_unreserved_words(self):
        assert not is_reserved("health1")
        assert not is_reserved("")
    
    def test_validate_link_collects_field_errors(self):
        errors = validate_link(Link(url="", abbreviation="bad code"))
        
        assert set(errors) == {"url", "abbreviation"}
        assert validate_link(Link(url="https://example.com")) == {}


class TestURLBuilder:
    """Test URL building utilities."""
    
    def test_build_short_url_no_prefix(self):
        url = build_short_url(abbreviation="sbxmplpti", base_url="https://example.com", path_prefix="")
        
        assert url == "https://example.com/sbxmplpti"
    
    def test_build_short_url_with_prefix(self):
        url = build_short_url(abbreviation="cm", base_url="https://example.com/", path_prefix="/s")
        
        assert url == "https://example.com/s/cm"
    
    def test_build_short_url_quotes_reserved_characters(self):
        url = build_short_url(abbreviation="xmpl?", base_url="https://example.com")
        
        assert url == "https://example.com/xmpl%3F"
    
    def test_build_home_url(self):
        assert build_home_url() == "/"
        assert build_home_url("/l") == "/l/"
        assert build_home_url("", "msg=deleted") == "/?msg=deleted"
    
    @pytest.mark.parametrize("value, expected", [
        ("/l", "/l"),
        ("l/", "/l"),
        ("/", ""),
        ("", ""),
        ("  /s/  ", "/s"),
    ])
    def test_normalize_path_prefix(self, value, expected):
        assert normalize_path_prefix(value) == expected


def test_common_exports():
    import shortlinks.common as common
    
    assert sorted(common.__all__) == [
        "build_home_url",
        "build_short_url",
        "is_reserved",
        "normalize_path_prefix",
        "setup_logging",
        "validate_link",
    ]
