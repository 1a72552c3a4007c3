import pytest

from gsm.errors import (
    ConfigError,
    CryptoError,
    CryptoKeyError,
    DecryptionFailed,
    EncryptionFailed,
    FileReadError,
    GithubError,
    GsmError,
    HttpError,
    InvalidPublicKeyLength,
    MissingEnvVarError,
    YamlParseError,
)


def test_file_read_error_message_and_base():
    err = FileReadError("boom")
    assert isinstance(err, ConfigError)
    assert str(err) == "File read error: boom"
    assert err.detail == "boom"


def test_yaml_parse_error_caught_as_gsm_error():
    err = YamlParseError("bad")
    assert isinstance(err, GsmError)
    assert str(err) == "YAML parse error: bad"
    with pytest.raises(GsmError, match="YAML parse error: bad"):
        raise err


@pytest.mark.parametrize(
    ("factory", "prefix"),
    [
        (EncryptionFailed, "Encryption failed: "),
        (DecryptionFailed, "Decryption failed: "),
    ],
)
def test_crypto_error_messages(factory, prefix):
    err = factory("x")
    assert isinstance(err, CryptoError)
    assert str(err) == prefix + "x"


def test_key_error_uses_repr():
    err = CryptoKeyError("len")
    assert isinstance(err, CryptoError)
    assert str(err) == "Key error: 'len'"


def test_http_error_keeps_body():
    err = HttpError("Not Found")
    assert isinstance(err, GithubError)
    assert err.body == "Not Found"
    assert str(err) == "HTTP error: Not Found"


def test_invalid_public_key_length_message():
    err = InvalidPublicKeyLength()
    assert isinstance(err, GithubError)
    assert str(err) == "Invalid public key length"


def test_missing_env_var_mentions_name():
    err = MissingEnvVarError("ENCRYPTION_KEY")
    assert isinstance(err, GsmError)
    assert err.name == "ENCRYPTION_KEY"
    assert "ENCRYPTION_KEY" in str(err)
    assert str(err).startswith("Env var error: ")