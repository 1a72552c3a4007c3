import base64
from pathlib import Path

import pytest

from gsm import crypto
from gsm.config import Config, EncryptedConfig, EncryptedValue
from gsm.errors import DecryptionFailed, GsmError
from gsm.operations import (
    decrypt_config,
    encrypt_config,
    get_output_path,
    process_directory,
)

KEY = b"password"


def _config():
    return Config(org="example", repositories=["repo1", "repo2"],
                  env={"KEY1": "value1", "KEY2": "value2"})


def _b64(data):
    return base64.b64encode(data).decode("ascii")


def test_encrypt_decrypt_round_trip():
    config = _config()
    encrypted = encrypt_config(config, KEY)
    assert encrypted.org == "example"
    assert encrypted.repositories == ["repo1", "repo2"]
    assert set(encrypted.env) == {"KEY1", "KEY2"}
    assert decrypt_config(encrypted, KEY) == config


def test_encrypted_parts_have_expected_sizes():
    encrypted = encrypt_config(_config(), KEY)
    value = encrypted.env["KEY1"]
    assert len(base64.b64decode(value.salt)) == crypto.SALT_LEN
    assert len(base64.b64decode(value.nonce)) == crypto.NONCE_LEN
    assert b"value1" not in base64.b64decode(value.ciphertext)


def test_wrong_key_fails():
    encrypted = encrypt_config(_config(), KEY)
    with pytest.raises(DecryptionFailed):
        decrypt_config(encrypted, b"secret")


def test_bad_base64_raises():
    encrypted = EncryptedConfig(
        org="example", repositories=[],
        env={"K": EncryptedValue(salt="!!!", nonce="AAAA", ciphertext="AAAA")},
    )
    with pytest.raises(GsmError, match="Base64 error"):
        decrypt_config(encrypted, KEY)


def test_non_utf8_plaintext_raises():
    salt, nonce, ciphertext = crypto.encrypt(b"\xff\xfe", KEY)
    encrypted = EncryptedConfig(
        org="example", repositories=[],
        env={"K": EncryptedValue(salt=_b64(salt), nonce=_b64(nonce),
                                 ciphertext=_b64(ciphertext))},
    )
    with pytest.raises(GsmError, match="UTF8 error"):
        decrypt_config(encrypted, KEY)


def test_get_output_path_in_directory():
    assert get_output_path(Path("conf") / "app.yaml", "encrypted", "yaml") == (
        Path("conf") / "app.encrypted.yaml"
    )


def test_get_output_path_bare_file():
    assert get_output_path("app.yaml", "decrypted", "yaml") == Path("app.decrypted.yaml")


def test_process_directory_handles_only_yaml_files(tmp_path):
    raw = tmp_path / "raw"
    raw.mkdir()
    (raw / "b.yaml").write_text("x")
    (raw / "a.yaml").write_text("y")
    (raw / "notes.txt").write_text("z")
    (raw / "dir.yaml").mkdir()

    seen = process_directory(tmp_path, "raw", "out", lambda src, dst: (src.name, dst))
    assert seen == [("a.yaml", tmp_path / "out" / "a.yaml"),
                    ("b.yaml", tmp_path / "out" / "b.yaml")]
    assert (tmp_path / "out").is_dir()


def test_process_directory_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError):
        process_directory(tmp_path, "missing", "out", lambda src, dst: None)


def test_process_directory_propagates_processor_error(tmp_path):
    (tmp_path / "raw").mkdir()
    (tmp_path / "raw" / "a.yaml").write_text("x")

    def fail(src, dst):
        raise GsmError("boom")

    with pytest.raises(GsmError, match="boom"):
        process_directory(tmp_path, "raw", "out", fail)