"""
Tests for settings, validators and the digest primitive
"""

import logging

import pytest
import structlog
from pydantic import ValidationError as PydanticValidationError

from octjwk.config import (
    KidGenerator,
    configure_logging,
    get_settings,
    reset_settings,
    update_settings,
)
from octjwk.crypto.hash import digest_bytes, secure_hash, sha256_digest
from octjwk.exceptions import DigestError, ValidationError
from octjwk.utils.validators import validate_key_id, validate_key_size


class TestSettings:
    """Test configuration loading"""

    def teardown_method(self):
        """Restore default settings"""
        reset_settings()

    def test_defaults(self):
        """Defaults match the documented values"""
        settings = reset_settings()

        assert settings.kid_generator == KidGenerator.NONE
        assert settings.generated_key_size == 256
        assert settings.log_level == "INFO"

    def test_environment(self, monkeypatch):
        """Settings are read from OCTJWK_ variables"""
        monkeypatch.setenv("OCTJWK_KID_GENERATOR", "thumbprint")

        settings = reset_settings()

        assert settings.kid_generator == KidGenerator.THUMBPRINT
        assert get_settings() is settings

    def test_update_ignores_unknown(self):
        """update_settings only touches known fields"""
        settings = update_settings(generated_key_size=512, not_a_setting=True)

        assert settings.generated_key_size == 512
        assert not hasattr(settings, "not_a_setting")

    def test_update_validates_values(self):
        """Invalid values are refused instead of stored"""
        with pytest.raises(PydanticValidationError):
            update_settings(kid_generator="uuid")

        assert get_settings().kid_generator == KidGenerator.NONE

    def test_configure_logging(self):
        """Logging can be configured at an explicit level"""
        root = logging.getLogger()
        previous = root.level
        try:
            configure_logging("debug")
            assert root.level == logging.DEBUG
        finally:
            root.setLevel(previous)
            structlog.reset_defaults()


class TestValidators:
    """Test input validators"""

    def test_key_id(self):
        """Any non-empty string of sane length is a valid kid"""
        assert validate_key_id("HMAC key used in JWS spec Appendix A.1 example")
        assert validate_key_id(None, required=False) is None

        with pytest.raises(ValidationError):
            validate_key_id(None)
        with pytest.raises(ValidationError):
            validate_key_id(123)
        with pytest.raises(ValidationError):
            validate_key_id("x" * 257)

    @pytest.mark.parametrize("size", [128, 256, 512, 4096])
    def test_key_size_valid(self, size):
        """Byte aligned sizes in range are accepted"""
        assert validate_key_size(size) == size

    @pytest.mark.parametrize("size", [64, 130, 8192, "256", True, None])
    def test_key_size_invalid(self, size):
        """Other sizes are rejected"""
        with pytest.raises(ValidationError):
            validate_key_size(size)


class TestDigest:
    """Test the digest primitive"""

    def test_secure_hash(self):
        """sha256 of empty input matches the known value"""
        assert secure_hash(b"") == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"

    def test_algorithm_names(self):
        """Supported algorithms produce their digest sizes"""
        assert len(digest_bytes(b"abc", "sha256")) == 32
        assert len(digest_bytes(b"abc", "sha384")) == 48

    def test_sha256_digest(self):
        """Raw SHA-256 is 32 bytes"""
        assert len(sha256_digest(b"abc")) == 32

    def test_unsupported_algorithm(self):
        """Weak or unknown algorithms are refused"""
        with pytest.raises(DigestError):
            secure_hash(b"abc", "md5")

    def test_non_bytes(self):
        """Only bytes can be hashed"""
        with pytest.raises(DigestError):
            secure_hash("abc")
