"""Client for the GitHub Actions secrets API and secret sealing."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from typing import Any, Optional

import httpx
from nacl.public import PublicKey as SodiumPublicKey
from nacl.public import SealedBox

from gsm.errors import GithubError, HttpError, InvalidPublicKeyLength

DEFAULT_API_URL = "https://api.github.com"
USER_AGENT = "gsm-cli"
_PUBLIC_KEY_LEN = 32


@dataclass(frozen=True)
class PublicKey:
    """A repository's public key for encrypting Actions secrets."""

    key: str
    key_id: str


class GithubClient:
    """GitHub API client for reading repository keys and writing secrets."""

    def __init__(
        self,
        token: str,
        base_url: Optional[str] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.token = token
        self.base_url = base_url if base_url is not None else DEFAULT_API_URL
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client()

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"token {self.token}", "User-Agent": USER_AGENT}

    def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self._client.request(method, url, headers=self._headers(), **kwargs)
        except httpx.HTTPError as exc:
            raise GithubError(f"Request error: {exc}") from exc
        if not response.is_success:
            raise HttpError(response.text)
        return response

    def get_repo_public_key(self, org: str, repo: str) -> PublicKey:
        """Fetch the public key used to encrypt secrets for a repository."""
        url = f"{self.base_url}/repos/{org}/{repo}/actions/secrets/public-key"
        response = self._send("GET", url)
        try:
            data = response.json()
            return PublicKey(key=str(data["key"]), key_id=str(data["key_id"]))
        except (ValueError, KeyError, TypeError) as exc:
            raise GithubError(f"JSON error: {exc}") from exc

    def push_repo_secret(
        self,
        org: str,
        repo: str,
        secret_name: str,
        encrypted_value: str,
        key_id: str,
    ) -> None:
        """Create or update one repository secret."""
        url = f"{self.base_url}/repos/{org}/{repo}/actions/secrets/{secret_name}"
        self._send("PUT", url, json={"encrypted_value": encrypted_value, "key_id": key_id})

    def close(self) -> None:
        """Release the underlying HTTP client if this object created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "GithubClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


def encrypt_github_secret(public_key_b64: str, secret: str) -> str:
    """Seal a secret for a repository public key; return it base64-encoded."""
    try:
        key_bytes = base64.b64decode(public_key_b64, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise GithubError(f"Base64 decode error: {exc}") from exc
    if len(key_bytes) != _PUBLIC_KEY_LEN:
        raise InvalidPublicKeyLength()
    sealed = SealedBox(SodiumPublicKey(key_bytes)).encrypt(secret.encode("utf-8"))
    return base64.b64encode(sealed).decode("ascii")