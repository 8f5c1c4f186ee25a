"""Unit tests for SymmetricCipher."""

from __future__ import annotations

import base64
import warnings

import pytest

from foundation_commons.config.settings import EnvSettingsLoader, SettingsFactory
from foundation_commons.config.validation import MissingRequiredSettingError
from foundation_commons.kernel.errors import CryptoError, DecryptionError, UnsupportedAlgorithmError
from foundation_commons.kernel.security import CipherPort
from foundation_commons.security.encryption import (
    BlockCipherAlgorithm,
    CipherSettings,
    SymmetricCipher,
)

STRINGS = [
    "1",
    "asdsv24dfsdf",
    "2tggsdfsdf",
    "loremipsumdolorsitamet",
    "123123123",
    "",
    "exactly sixteen!",
    "trailing whitespace survives   \n\t",
    "  leading too",
    "zażółć gęślą jaźń ✓",
    "x" * 1000,
]


class TestRoundTrip:
    @pytest.mark.parametrize("plaintext", STRINGS)
    def test_encrypt_then_decrypt(self, plaintext: str) -> None:
        cipher = SymmetricCipher("sensitivity")
        assert cipher.decrypt(cipher.encrypt(plaintext)) == plaintext

    @pytest.mark.parametrize("plaintext", STRINGS)
    def test_camellia(self, plaintext: str) -> None:
        cipher = SymmetricCipher("sensitivity", algorithm="camellia")
        assert cipher.decrypt(cipher.encrypt(plaintext)) == plaintext

    def test_camellia_emits_no_warnings(self) -> None:
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            cipher = SymmetricCipher("sensitivity", algorithm="camellia")
            assert cipher.decrypt(cipher.encrypt("quiet")) == "quiet"

    def test_bytes_plaintext(self) -> None:
        cipher = SymmetricCipher(b"\x00secret")
        assert cipher.decrypt(cipher.encrypt(b"payload")) == "payload"

    def test_other_instance_with_same_secret_decrypts(self) -> None:
        token = SymmetricCipher("secret").encrypt("Hide from NSA... not really...")
        assert SymmetricCipher("secret").decrypt(token) == "Hide from NSA... not really..."

    def test_bytes_token_accepted(self) -> None:
        cipher = SymmetricCipher("secret")
        assert cipher.decrypt(cipher.encrypt("abc").encode("ascii")) == "abc"


class TestEncrypt:
    @pytest.mark.parametrize("plaintext", STRINGS[:5])
    def test_output_differs_from_input(self, plaintext: str) -> None:
        encrypted = SymmetricCipher("secret").encrypt(plaintext)
        assert isinstance(encrypted, str)
        assert encrypted != plaintext

    def test_output_is_iv_plus_whole_blocks(self) -> None:
        cipher = SymmetricCipher("secret")
        raw = base64.b64decode(cipher.encrypt("loremipsumdolorsitamet"))
        assert len(raw) == cipher.iv_size + 32
        assert len(raw) % 16 == 0

    def test_fresh_iv_per_message(self) -> None:
        cipher = SymmetricCipher("secret")
        first = base64.b64decode(cipher.encrypt("same"))
        second = base64.b64decode(cipher.encrypt("same"))
        assert first[:16] != second[:16]
        assert first != second

    @pytest.mark.parametrize("plaintext", STRINGS[:5])
    def test_different_secrets_differ(self, plaintext: str) -> None:
        one = SymmetricCipher("secret").encrypt(plaintext)
        two = SymmetricCipher("not so secret...").encrypt(plaintext)
        assert one != two

    def test_is_a_cipher_port(self) -> None:
        assert isinstance(SymmetricCipher("s"), CipherPort)


class TestDecryptErrors:
    def test_wrong_secret(self) -> None:
        token = SymmetricCipher("secret").encrypt("some plaintext message")
        with pytest.raises(DecryptionError):
            SymmetricCipher("other secret").decrypt(token)

    @pytest.mark.parametrize("token", ["not base64!!", "YWJj\n", 12345])
    def test_not_base64(self, token) -> None:
        with pytest.raises(DecryptionError):
            SymmetricCipher("secret").decrypt(token)

    @pytest.mark.parametrize("size", [0, 10, 16, 40])
    def test_invalid_length(self, size: int) -> None:
        token = base64.b64encode(b"\x00" * size).decode("ascii")
        with pytest.raises(DecryptionError) as exc_info:
            SymmetricCipher("secret").decrypt(token)
        assert exc_info.value.detail["length"] == size

    def test_decryption_error_is_crypto_error(self) -> None:
        with pytest.raises(CryptoError):
            SymmetricCipher("secret").decrypt("!!")


class TestAlgorithm:
    def test_default_is_aes(self) -> None:
        assert SymmetricCipher("s").algorithm is BlockCipherAlgorithm.AES

    def test_case_insensitive(self) -> None:
        assert SymmetricCipher("s", "CAMELLIA").algorithm is BlockCipherAlgorithm.CAMELLIA

    @pytest.mark.parametrize("algorithm", ["des", "rijndael-256", "", None])
    def test_unsupported(self, algorithm) -> None:
        with pytest.raises(UnsupportedAlgorithmError) as exc_info:
            SymmetricCipher("s", algorithm)
        assert exc_info.value.position == 2

    def test_algorithms_are_not_interchangeable(self) -> None:
        token = SymmetricCipher("s", "aes").encrypt("a longer message to encrypt")
        with pytest.raises(DecryptionError):
            SymmetricCipher("s", "camellia").decrypt(token)

    def test_repr_hides_key(self) -> None:
        assert repr(SymmetricCipher("topsecret")) == "SymmetricCipher(algorithm='aes')"


class TestFromSettings:
    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FOUNDATION_CIPHER_SECRET", "env-secret")
        monkeypatch.setenv("FOUNDATION_CIPHER_ALGORITHM", "camellia")
        cipher = SymmetricCipher.from_settings(EnvSettingsLoader().load(CipherSettings))
        assert cipher.algorithm is BlockCipherAlgorithm.CAMELLIA
        assert SymmetricCipher("env-secret", "camellia").decrypt(cipher.encrypt("hi")) == "hi"

    def test_secret_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("FOUNDATION_CIPHER_SECRET", raising=False)
        with pytest.raises(MissingRequiredSettingError):
            SettingsFactory.create(CipherSettings)

    def test_secret_not_in_repr(self) -> None:
        settings = SettingsFactory.create(CipherSettings, overrides={"secret": "hush"})
        assert "hush" not in repr(settings)
