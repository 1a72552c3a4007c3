"""Exception hierarchy for the secrets manager."""

from __future__ import annotations


class GsmError(Exception):
    """Base class for every error raised by the package."""


class ConfigError(GsmError):
    """A configuration file could not be loaded."""


class FileReadError(ConfigError):
    """The configuration file could not be read."""

    def __init__(self, detail: object) -> None:
        self.detail = detail
        super().__init__(f"File read error: {detail}")


class YamlParseError(ConfigError):
    """The configuration file is not valid YAML or has the wrong shape."""

    def __init__(self, detail: object) -> None:
        self.detail = detail
        super().__init__(f"YAML parse error: {detail}")


class CryptoError(GsmError):
    """Symmetric encryption or decryption failed."""


class CryptoKeyError(CryptoError):
    """The derived key could not be used to build a cipher."""

    def __init__(self, detail: object) -> None:
        self.detail = detail
        super().__init__(f"Key error: {detail!r}")


class EncryptionFailed(CryptoError):
    """Encrypting a value failed."""

    def __init__(self, detail: object) -> None:
        self.detail = detail
        super().__init__(f"Encryption failed: {detail}")


class DecryptionFailed(CryptoError):
    """Decrypting a value failed (wrong key or tampered data)."""

    def __init__(self, detail: object) -> None:
        self.detail = detail
        super().__init__(f"Decryption failed: {detail}")


class GithubError(GsmError):
    """Talking to the GitHub API failed."""


class HttpError(GithubError):
    """The GitHub API answered with a non-success status."""

    def __init__(self, body: str) -> None:
        self.body = body
        super().__init__(f"HTTP error: {body}")


class InvalidPublicKeyLength(GithubError):
    """The repository public key does not have the expected length."""

    def __init__(self) -> None:
        super().__init__("Invalid public key length")


class MissingEnvVarError(GsmError):
    """A required environment variable is not set."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Env var error: environment variable not found ({name})")