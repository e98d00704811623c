# tests/test_cli.py

import pytest
from click.testing import CliRunner

from gitcrypt_demo.cli.main import gcd
from gitcrypt_demo.core.decoding import GITCRYPT_MARKER


@pytest.fixture
def resources_dir(tmp_path):
    """A bundle with an encrypted secret and a plaintext stand-in."""
    (tmp_path / "Secret.txt").write_bytes(GITCRYPT_MARKER + b"\x10\x20\x30")
    (tmp_path / "Unsecret.txt").write_text("hello world\n", encoding="utf-8")
    return tmp_path


def test_show_prints_fallback_line(resources_dir):
    result = CliRunner().invoke(gcd, ["show", "--resources", str(resources_dir)])
    assert result.exit_code == 0
    assert result.output.strip() == "hello world"


def test_show_with_missing_fallback(resources_dir):
    result = CliRunner().invoke(gcd, ["show", "--resources", str(resources_dir), "--fallback", "Nope.txt"])
    assert result.exit_code == 0
    assert result.output.strip() == "File missing!"


def test_show_with_encrypted_fallback(resources_dir):
    result = CliRunner().invoke(gcd, ["show", "--resources", str(resources_dir), "--fallback", "Secret.txt"])
    assert result.exit_code == 0
    assert result.output.strip() == "file Secret.txt looks encrypted"


def test_inspect_reports_each_file(resources_dir):
    result = CliRunner().invoke(gcd, ["inspect", "--resources", str(resources_dir)])
    assert result.exit_code == 0
    assert "Secret.txt" in result.output
    assert "plaintext" in result.output
    assert "Displayed: hello world" in result.output


def test_rejects_missing_resources_dir(tmp_path):
    result = CliRunner().invoke(gcd, ["show", "--resources", str(tmp_path / "missing")])
    assert result.exit_code != 0


def test_inspect_prints_brackets_literally(resources_dir):
    (resources_dir / "Secret.txt").write_text("[/bold] oops\n", encoding="utf-8")
    result = CliRunner().invoke(gcd, ["inspect", "--resources", str(resources_dir)])
    assert result.exit_code == 0
    assert "Displayed: [/bold] oops" in result.output
