"""Whole-configuration encryption and directory batch helpers."""

from __future__ import annotations

import base64
import binascii
from collections.abc import Callable
from os import PathLike
from pathlib import Path
from typing import TypeVar, Union

from gsm import crypto
from gsm.config import Config, EncryptedConfig, EncryptedValue
from gsm.errors import GsmError

PathType = Union[str, "PathLike[str]"]
T = TypeVar("T")


def _b64encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def _b64decode(text: str) -> bytes:
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise GsmError(f"Base64 error: {exc}") from exc


def encrypt_config(config: Config, key: bytes) -> EncryptedConfig:
    """Encrypt every secret value of a configuration with a password."""
    encrypted_env: dict[str, EncryptedValue] = {}
    for name, value in config.env.items():
        salt, nonce, ciphertext = crypto.encrypt(value.encode("utf-8"), key)
        encrypted_env[name] = EncryptedValue(
            salt=_b64encode(salt),
            nonce=_b64encode(nonce),
            ciphertext=_b64encode(ciphertext),
        )
    return EncryptedConfig(
        org=config.org,
        repositories=list(config.repositories),
        env=encrypted_env,
    )


def decrypt_config(encrypted_config: EncryptedConfig, key: bytes) -> Config:
    """Decrypt every secret value of an encrypted configuration."""
    raw_env: dict[str, str] = {}
    for name, value in encrypted_config.env.items():
        salt = _b64decode(value.salt)
        nonce = _b64decode(value.nonce)
        ciphertext = _b64decode(value.ciphertext)
        plaintext = crypto.decrypt(ciphertext, key, salt, nonce)
        try:
            raw_env[name] = plaintext.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise GsmError(f"UTF8 error: {exc}") from exc
    return Config(
        org=encrypted_config.org,
        repositories=list(encrypted_config.repositories),
        env=raw_env,
    )


def get_output_path(input_path: PathType, suffix: str, new_ext: str) -> Path:
    """Build '<dir>/<stem>.<suffix>.<new_ext>' next to the input file."""
    path = Path(input_path)
    return path.parent / f"{path.stem}.{suffix}.{new_ext}"


def process_directory(
    parent_dir: PathType,
    input_subdir: str,
    output_subdir: str,
    processor: Callable[[Path, Path], T],
) -> list[T]:
    """Run ``processor(input, output)`` for every .yaml file of a subfolder.

    The output subfolder is created if needed; each output file keeps the
    input file's name. Returns the processor results in file-name order.
    """
    parent = Path(parent_dir)
    input_dir = parent / input_subdir
    output_dir = parent / output_subdir
    output_dir.mkdir(parents=True, exist_ok=True)

    results: list[T] = []
    for path in sorted(input_dir.iterdir()):
        if path.is_file() and path.suffix == ".yaml":
            results.append(processor(path, output_dir / path.name))
    return results