import pytest

from gsm import cli
from gsm.commands import decrypt_file
from gsm.config import Config, dump_yaml, load_config_from_file

CONFIG = Config(org="example", repositories=["repo1"], env={"KEY1": "value1"})


def test_parser_defaults():
    parser = cli.build_parser()
    assert parser.parse_args(["validate"]).file == "examples/production.yaml"
    assert parser.parse_args(["push", "-f", "c.yaml"]).api_url == "https://api.github.com"


def test_parser_subcommands():
    parser = cli.build_parser()
    args = parser.parse_args(["encrypt-all", "-i", "secrets"])
    assert args.input == "secrets"
    args = parser.parse_args(["decrypt", "--file", "a.yaml", "--output", "b.yaml"])
    assert (args.file, args.output) == ("a.yaml", "b.yaml")


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args([])


def test_main_encrypt(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ENCRYPTION_KEY", "password")
    raw = tmp_path / "app.yaml"
    raw.write_text(dump_yaml(CONFIG), encoding="utf-8")
    out = tmp_path / "enc.yaml"

    assert cli.main(["encrypt", "-f", str(raw), "-o", str(out)]) == 0
    assert "Encrypted" in capsys.readouterr().out
    dec = decrypt_file(out, tmp_path / "dec.yaml", b"password")
    assert load_config_from_file(dec) == CONFIG


def test_main_validate_invalid(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    bad = tmp_path / "bad.yaml"
    bad.write_text("not: [valid")
    assert cli.main(["validate", "-f", str(bad)]) == 1
    assert "Error:" in capsys.readouterr().err


def test_main_missing_input_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert cli.main(["encrypt-all", "-i", str(tmp_path / "nowhere")]) == 1