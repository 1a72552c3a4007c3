"""Configuration files: plain and encrypted secret sets for repositories."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from os import PathLike
from typing import Any, Union

import yaml

from gsm.errors import FileReadError, YamlParseError

PathType = Union[str, "PathLike[str]"]


def _require(data: Any, name: str) -> Any:
    if not isinstance(data, Mapping):
        raise YamlParseError("invalid type: expected a mapping")
    if name not in data:
        raise YamlParseError(f"missing field `{name}`")
    return data[name]


def _as_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise YamlParseError(f"{name}: invalid type, expected a string")
    return value


def _as_str_list(value: Any, name: str) -> list[str]:
    if not isinstance(value, list):
        raise YamlParseError(f"{name}: invalid type, expected a sequence")
    return [_as_str(item, name) for item in value]


def _as_mapping(value: Any, name: str) -> Mapping:
    if not isinstance(value, Mapping):
        raise YamlParseError(f"{name}: invalid type, expected a map")
    return value


@dataclass
class Config:
    """Plain-text secrets for a set of repositories in one organisation."""

    org: str
    repositories: list[str] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "Config":
        env = _as_mapping(_require(data, "env"), "env")
        return cls(
            org=_as_str(_require(data, "org"), "org"),
            repositories=_as_str_list(_require(data, "repositories"), "repositories"),
            env={_as_str(k, "env"): _as_str(v, f"env.{k}") for k, v in env.items()},
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "org": self.org,
            "repositories": list(self.repositories),
            "env": dict(self.env),
        }


@dataclass
class EncryptedValue:
    """One encrypted secret, each part base64-encoded."""

    salt: str
    nonce: str
    ciphertext: str

    @classmethod
    def from_dict(cls, data: Any) -> "EncryptedValue":
        return cls(
            salt=_as_str(_require(data, "salt"), "salt"),
            nonce=_as_str(_require(data, "nonce"), "nonce"),
            ciphertext=_as_str(_require(data, "ciphertext"), "ciphertext"),
        )

    def to_dict(self) -> dict[str, str]:
        return {"salt": self.salt, "nonce": self.nonce, "ciphertext": self.ciphertext}


@dataclass
class EncryptedConfig:
    """A configuration whose secret values are encrypted."""

    org: str
    repositories: list[str] = field(default_factory=list)
    env: dict[str, EncryptedValue] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "EncryptedConfig":
        env = _as_mapping(_require(data, "env"), "env")
        return cls(
            org=_as_str(_require(data, "org"), "org"),
            repositories=_as_str_list(_require(data, "repositories"), "repositories"),
            env={_as_str(k, "env"): EncryptedValue.from_dict(v) for k, v in env.items()},
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "org": self.org,
            "repositories": list(self.repositories),
            "env": {k: v.to_dict() for k, v in self.env.items()},
        }


def _load_yaml(path: PathType) -> Any:
    try:
        with open(path, encoding="utf-8") as handle:
            content = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(exc) from exc
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise YamlParseError(exc) from exc


def load_config_from_file(path: PathType) -> Config:
    """Read and validate a plain configuration file."""
    return Config.from_dict(_load_yaml(path))


def load_encrypted_config_from_file(path: PathType) -> EncryptedConfig:
    """Read and validate an encrypted configuration file."""
    return EncryptedConfig.from_dict(_load_yaml(path))


def dump_yaml(data: Any) -> str:
    """Serialise a configuration object or plain mapping to YAML text."""
    if isinstance(data, (Config, EncryptedConfig, EncryptedValue)):
        data = data.to_dict()
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)