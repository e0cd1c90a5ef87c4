"""
Tests for key fingerprints, thumbprints and the DER encoding behind them
"""

import pytest

from octjwk.config import reset_settings, update_settings
from octjwk.crypto.der import encode_length, encode_sequence, encode_utf8_string
from octjwk.exceptions import ArgumentShapeError
from octjwk.jwk import SymmetricJWK


# sha256 of 30 0f 0c 08 "mysecret" 0c 03 "oct"
MYSECRET_DIGEST = "c7a3a5bb9710daaabfa7cc522e98b498569d973956e0f0f866b659696b699d04"

# RFC 7517 appendix A.3 symmetric key
RFC_HMAC_KEY = {
    "kty": "oct",
    "alg": "HS256",
    "k": "AyM1SysPpbyDfgZld3umj1qzKObwVMkoqQ-EstJQLr_T-1qS0gZH75aKtMN3Yj0iPS4hcgUuTwjAzZr1Z9CAow",
    "kid": "HMAC key used in JWS spec Appendix A.1 example",
}


class TestDEREncoding:
    """Test the canonical encoder"""

    def test_short_and_long_lengths(self):
        """Lengths below 128 use one byte, longer ones the long form"""
        assert encode_length(0) == b"\x00"
        assert encode_length(127) == b"\x7f"
        assert encode_length(128) == b"\x81\x80"
        assert encode_length(300) == b"\x82\x01\x2c"

    def test_negative_length(self):
        """Negative lengths are rejected"""
        with pytest.raises(ArgumentShapeError):
            encode_length(-1)

    def test_utf8_string(self):
        """str is UTF-8 encoded, bytes are taken verbatim"""
        assert encode_utf8_string("oct") == b"\x0c\x03oct"
        assert encode_utf8_string("é") == b"\x0c\x02\xc3\xa9"
        assert encode_utf8_string(b"\xff") == b"\x0c\x01\xff"

    def test_utf8_string_rejects_other_types(self):
        """Only str and bytes can be encoded"""
        with pytest.raises(ArgumentShapeError):
            encode_utf8_string(42)

    def test_sequence(self):
        """A sequence wraps its encoded elements"""
        encoded = encode_sequence(encode_utf8_string("mysecret"), encode_utf8_string("oct"))

        assert encoded == b"\x30\x0f\x0c\x08mysecret\x0c\x03oct"

    def test_no_delimiter_ambiguity(self):
        """Shifting characters between fields changes the encoding"""
        first = encode_sequence(encode_utf8_string("ab"), encode_utf8_string("c"))
        second = encode_sequence(encode_utf8_string("a"), encode_utf8_string("bc"))

        assert first != second


class TestKeyDigest:
    """Test key_digest()"""

    def teardown_method(self):
        """Restore default settings"""
        reset_settings()

    def test_known_value(self):
        """Digest matches SHA-256 over the DER sequence"""
        assert SymmetricJWK("mysecret").key_digest() == MYSECRET_DIGEST

    def test_format(self):
        """Digest is 64 lowercase hex characters"""
        digest = SymmetricJWK("mysecret").key_digest()

        assert len(digest) == 64
        assert digest == digest.lower()
        int(digest, 16)

    def test_independent_of_metadata(self):
        """Metadata and input shape do not affect the digest"""
        bare = SymmetricJWK("mysecret")
        rich = SymmetricJWK({"kty": "oct", "k": "mysecret", "use": "sig"}, {"kid": "a", "alg": "HS256"})

        assert bare.key_digest() == rich.key_digest()

        rich["kid"] = "b"
        assert bare.key_digest() == rich.key_digest()

    def test_str_and_utf8_bytes_agree(self):
        """A str secret and its UTF-8 bytes share a digest"""
        assert SymmetricJWK("mysecret").key_digest() == SymmetricJWK(b"mysecret").key_digest()

    def test_distinct_secrets_differ(self):
        """Different secrets give different digests"""
        digests = {SymmetricJWK(f"secret-{i}").key_digest() for i in range(50)}

        assert len(digests) == 50

    def test_long_secret(self):
        """Secrets longer than 127 bytes are encoded with long-form lengths"""
        jwk = SymmetricJWK("x" * 300)

        assert len(jwk.key_digest()) == 64
        assert jwk.key_digest() != SymmetricJWK("x" * 299).key_digest()

    def test_stable_across_settings_changes(self):
        """Changing settings leaves digests, hashes and generated kids intact"""
        jwk = SymmetricJWK("mysecret", options={"kid_generator": "key_digest"})
        keys = {jwk}

        update_settings(kid_generator="thumbprint", generated_key_size=512)

        assert jwk in keys
        assert jwk.key_digest() == MYSECRET_DIGEST
        assert jwk.kid == jwk.key_digest()


class TestThumbprint:
    """Test RFC 7638 thumbprints"""

    def test_known_values(self):
        """Thumbprint is SHA-256 over the sorted required members"""
        assert SymmetricJWK("mysecret").thumbprint() == "F4c3H2YpYRdWsyBkueQrGbsLoNosffnhXpgV6Al5UjE"
        assert SymmetricJWK(RFC_HMAC_KEY).thumbprint() == "y_x3gCJnL6oKGBBIXScabduwxTVy2Wd2bzRVEUbdUzc"

    def test_ignores_metadata(self):
        """Optional members are not part of the thumbprint"""
        jwk = SymmetricJWK(RFC_HMAC_KEY)
        bare = SymmetricJWK(RFC_HMAC_KEY["k"])

        assert jwk.thumbprint() == bare.thumbprint()
