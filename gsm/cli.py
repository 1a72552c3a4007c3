"""Command-line entry point: GitHub Secrets Manager."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from termcolor import colored

from gsm import commands
from gsm.errors import GsmError
from gsm.github import DEFAULT_API_URL


def _run_validate(args: argparse.Namespace) -> None:
    commands.validate(args.file)


def _run_encrypt(args: argparse.Namespace) -> None:
    commands.encrypt_file(args.file, args.output)


def _run_decrypt(args: argparse.Namespace) -> None:
    commands.decrypt_file(args.file, args.output)


def _run_encrypt_all(args: argparse.Namespace) -> None:
    commands.encrypt_all(args.input)


def _run_decrypt_all(args: argparse.Namespace) -> None:
    commands.decrypt_all(args.input)


def _run_push(args: argparse.Namespace) -> None:
    commands.push(args.file, args.api_url)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(prog="gsm", description="GitHub Secrets Manager CLI")
    sub = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    p = sub.add_parser("validate", help="Validate a configuration file")
    p.add_argument("-f", "--file", default=commands.DEFAULT_VALIDATE_FILE,
                   help="Path to the config file")
    p.set_defaults(handler=_run_validate)

    p = sub.add_parser("encrypt", help="Encrypt a raw config file")
    p.add_argument("-f", "--file", required=True, help="Path to the raw config file")
    p.add_argument("-o", "--output", help="Output file path (optional)")
    p.set_defaults(handler=_run_encrypt)

    p = sub.add_parser("decrypt", help="Decrypt an encrypted config file")
    p.add_argument("-f", "--file", required=True, help="Path to the encrypted config file")
    p.add_argument("-o", "--output", help="Output file path (optional)")
    p.set_defaults(handler=_run_decrypt)

    p = sub.add_parser("encrypt-all", help="Encrypt all raw config files")
    p.add_argument("-i", "--input", required=True,
                   help="Parent input folder containing 'raw' and 'encrypted' subfolders")
    p.set_defaults(handler=_run_encrypt_all)

    p = sub.add_parser("decrypt-all", help="Decrypt all encrypted config files")
    p.add_argument("-i", "--input", required=True,
                   help="Parent input folder containing 'encrypted' and 'raw' subfolders")
    p.set_defaults(handler=_run_decrypt_all)

    p = sub.add_parser("push", help="Push secrets to GitHub repositories")
    p.add_argument("-f", "--file", required=True, help="Path to the raw config file")
    p.add_argument("--api-url", default=DEFAULT_API_URL,
                   help="GitHub API base URL (for GitHub Enterprise)")
    p.set_defaults(handler=_run_push)

    return parser


def _load_env_file() -> None:
    path = find_dotenv(usecwd=True)
    if not path:
        print(f"{colored('Warning', 'yellow')}: Could not load .env file: not found",
              file=sys.stderr)
        return
    load_dotenv(path)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line; return the process exit status."""
    _load_env_file()
    args = build_parser().parse_args(argv)
    try:
        args.handler(args)
    except (GsmError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())