"""The user administration CLI in scripts/."""

import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "manage_users.py"


@pytest.fixture
def cli(monkeypatch, engine, session_factory):
    spec = importlib.util.spec_from_file_location("manage_users", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    monkeypatch.setattr(module, "engine", engine)
    monkeypatch.setattr(module, "SessionLocal", session_factory)
    return module


def test_create_then_check(cli, capsys):
    assert cli.main(["create", "Boss@Yitro.com", "Boss", "--role", "admin", "--password", "pw-1"]) == 0
    assert "Created boss@yitro.com (admin)" in capsys.readouterr().out

    assert cli.main(["check", "boss@yitro.com", "--password", "pw-1"]) == 0
    assert "Password OK" in capsys.readouterr().out


def test_check_wrong_password(cli, capsys):
    cli.main(["create", "rep@yitro.com", "Rep", "--password", "right"])
    capsys.readouterr()

    assert cli.main(["check", "rep@yitro.com", "--password", "wrong"]) == 1
    assert "does not match" in capsys.readouterr().out


def test_check_unknown_user(cli, capsys):
    assert cli.main(["check", "ghost@yitro.com", "--password", "x"]) == 1
    assert "No user" in capsys.readouterr().out


def test_create_duplicate_reports_error(cli, capsys):
    cli.main(["create", "dup@yitro.com", "Dup", "--password", "pw"])
    capsys.readouterr()

    assert cli.main(["create", "DUP@yitro.com", "Dup", "--password", "pw"]) == 1
    assert "User already exists" in capsys.readouterr().out
