# gsm — GitHub Secrets Manager

`gsm` keeps repository secrets in YAML files. It encrypts them at rest with a
password, and it pushes them to the GitHub Actions secrets of one or more
repositories.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## Configuration file

A raw config lists an organisation, its repositories and the secrets to set:

```yaml
org: example
repositories:
  - repo1
  - repo2
env:
  KEY1: value1
  KEY2: value2
```

All three keys are required. `org` and every repository name and secret value
must be strings.

When you encrypt a config, each value in `env` is replaced by a mapping with a
`salt`, a `nonce` and a `ciphertext`, all base64. The cipher is AES-256-GCM.
Its key is derived from the password through PBKDF2-HMAC-SHA256 with 100,000
iterations and a fresh random 16-byte salt per value; each value also gets a
fresh random 12-byte nonce. `org` and `repositories` stay in plain text.

## Environment

- `ENCRYPTION_KEY`: the password used by `encrypt`, `decrypt`, `encrypt-all`
  and `decrypt-all`.
- `GITHUB_TOKEN`: the token used by `push`.

At start-up the command looks for a `.env` file, starting in the working
directory and moving up through its parents, and loads it if found. If none is
found it prints a warning on standard error and carries on.

## Commands

```
gsm validate --file config.yaml
gsm encrypt --file config.yaml [--output out.yaml]
gsm decrypt --file config.encrypted.yaml [--output out.yaml]
gsm encrypt-all --input secrets/
gsm decrypt-all --input secrets/
gsm push --file config.yaml [--api-url https://github.example.com/api/v3]
```

Short forms: `-f` for `--file`, `-o` for `--output`, `-i` for `--input`.

- `validate` checks that a file loads as a config. Without `--file` it checks
  `examples/production.yaml`.
- `encrypt` writes `<stem>.encrypted.yaml` beside its input unless you give
  `--output`.
- `decrypt` writes `<stem>.decrypted.yaml` beside its input unless you give
  `--output` (so `config.encrypted.yaml` becomes
  `config.encrypted.decrypted.yaml`).
- `encrypt-all` reads every file ending in `.yaml` in `<input>/raw`, in name
  order, and writes the encrypted copies under the same names to
  `<input>/encrypted`, creating that folder if needed.
- `decrypt-all` does the reverse: it reads `<input>/encrypted` and writes to
  `<input>/raw`.
- `push` fetches each repository's public key, seals every secret with it and
  uploads it through the GitHub API. `--api-url` points at a GitHub Enterprise
  API; the default is `https://api.github.com`.

Each command prints a line for what it did. On an error the message is printed
on standard error and the exit status is 1.

## Library use

```python
from gsm.config import load_config_from_file
from gsm.operations import encrypt_config, decrypt_config

password = b"password"
config = load_config_from_file("config.yaml")
encrypted = encrypt_config(config, password)
assert decrypt_config(encrypted, password) == config
```

The modules:

- `gsm.config`: the `Config`, `EncryptedValue` and `EncryptedConfig`
  dataclasses (each with `from_dict` and `to_dict`),
  `load_config_from_file`, `load_encrypted_config_from_file` and `dump_yaml`.
- `gsm.crypto`: `derive_key`, `encrypt` (returns `(salt, nonce, ciphertext)`)
  and `decrypt`.
- `gsm.operations`: `encrypt_config`, `decrypt_config`, `get_output_path` and
  `process_directory`.
- `gsm.github`: `GithubClient` (`get_repo_public_key`, `push_repo_secret`,
  usable as a context manager), `PublicKey` and `encrypt_github_secret`.
- `gsm.commands`: the actions behind the commands — `validate`,
  `encrypt_file`, `decrypt_file`, `encrypt_all`, `decrypt_all`, `push` and
  `encryption_key_from_env`. The file functions take an optional `key`, and
  `push` an optional `token` and `httpx.Client`, in place of the environment.
- `gsm.errors`: every error derives from `GsmError`; `ConfigError`,
  `CryptoError` and `GithubError` group the failures of loading, encryption
  and the GitHub API, and `MissingEnvVarError` reports an unset variable.

## What it does not do

`push` only creates or updates repository secrets. It does not delete secrets,
list them, or manage organisation or environment secrets.