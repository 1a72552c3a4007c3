"""GitHub Secrets Manager: encrypted YAML secret configs and pushing them to GitHub."""

__version__ = "0.1.0"