"""The actions behind each command: encrypt, decrypt, validate and push."""

from __future__ import annotations

import os
import sys
from os import PathLike
from pathlib import Path
from typing import Optional, Union

import httpx

from gsm.config import (
    Config,
    dump_yaml,
    load_config_from_file,
    load_encrypted_config_from_file,
)
from gsm.errors import ConfigError, MissingEnvVarError
from gsm.github import DEFAULT_API_URL, GithubClient, encrypt_github_secret
from gsm.operations import (
    decrypt_config,
    encrypt_config,
    get_output_path,
    process_directory,
)

PathType = Union[str, "PathLike[str]"]
DEFAULT_VALIDATE_FILE = "examples/production.yaml"


def _env(name: str) -> str:
    try:
        return os.environ[name]
    except KeyError:
        raise MissingEnvVarError(name) from None


def encryption_key_from_env() -> bytes:
    """Return the password held in ENCRYPTION_KEY."""
    return _env("ENCRYPTION_KEY").encode("utf-8")


def encrypt_file(
    file: PathType,
    output: Optional[PathType] = None,
    key: Optional[bytes] = None,
) -> Path:
    """Encrypt a raw configuration file; return the path written."""
    input_path = Path(file)
    output_path = Path(output) if output is not None else get_output_path(
        input_path, "encrypted", "yaml"
    )
    config = load_config_from_file(input_path)
    password = key if key is not None else encryption_key_from_env()
    encrypted = encrypt_config(config, password)
    output_path.write_text(dump_yaml(encrypted), encoding="utf-8")
    print(f"Encrypted '{input_path}' to '{output_path}' ✅")
    return output_path


def decrypt_file(
    file: PathType,
    output: Optional[PathType] = None,
    key: Optional[bytes] = None,
) -> Path:
    """Decrypt an encrypted configuration file; return the path written."""
    input_path = Path(file)
    output_path = Path(output) if output is not None else get_output_path(
        input_path, "decrypted", "yaml"
    )
    encrypted = load_encrypted_config_from_file(input_path)
    password = key if key is not None else encryption_key_from_env()
    config = decrypt_config(encrypted, password)
    output_path.write_text(dump_yaml(config), encoding="utf-8")
    print(f"Decrypted '{input_path}' to '{output_path}' ✅")
    return output_path


def encrypt_all(input_dir: PathType, key: Optional[bytes] = None) -> list[Path]:
    """Encrypt every file of '<input_dir>/raw' into '<input_dir>/encrypted'."""
    return process_directory(
        input_dir, "raw", "encrypted", lambda src, dst: encrypt_file(src, dst, key)
    )


def decrypt_all(input_dir: PathType, key: Optional[bytes] = None) -> list[Path]:
    """Decrypt every file of '<input_dir>/encrypted' into '<input_dir>/raw'."""
    return process_directory(
        input_dir, "encrypted", "raw", lambda src, dst: decrypt_file(src, dst, key)
    )


def validate(file: PathType = DEFAULT_VALIDATE_FILE) -> Config:
    """Check that a configuration file loads; report the outcome."""
    try:
        config = load_config_from_file(file)
    except ConfigError as exc:
        print(f"Config file '{file}' is invalid: {exc}", file=sys.stderr)
        raise
    print(f"Config file '{file}' is valid ✅")
    return config


def push(
    file: PathType,
    api_url: str = DEFAULT_API_URL,
    token: Optional[str] = None,
    client: Optional[httpx.Client] = None,
) -> list[tuple[str, str]]:
    """Push every secret of a configuration to each of its repositories.

    Returns the (repository, secret name) pairs pushed, in order.
    """
    config = load_config_from_file(file)
    auth = token if token is not None else _env("GITHUB_TOKEN")
    base_url = None if api_url == DEFAULT_API_URL else api_url

    pushed: list[tuple[str, str]] = []
    with GithubClient(auth, base_url, client) as github:
        for repo in config.repositories:
            print(f"Pushing secrets to repo: {repo}...")
            public_key = github.get_repo_public_key(config.org, repo)
            for secret_name, value in config.env.items():
                sealed = encrypt_github_secret(public_key.key, value)
                github.push_repo_secret(
                    config.org, repo, secret_name, sealed, public_key.key_id
                )
                print(f"  - {secret_name}: pushed")
                pushed.append((repo, secret_name))
    print("All secrets pushed successfully!")
    return pushed