"""Tests for the command line entry point."""

import io

import pytest
from textformat.cli import main


@pytest.fixture(autouse=True)
def no_config(tmp_path, monkeypatch):
    monkeypatch.setenv("TEXTFORMAT_CONFIG", str(tmp_path / "missing.yaml"))


class TestCli:
    def test_html(self, capsys):
        assert main(["html", "§cHi§r"]) == 0
        assert capsys.readouterr().out == "<span style=color:#F55>Hi</span>\n"

    def test_colorize(self, capsys):
        assert main(["colorize", "&cHi &z"]) == 0
        assert capsys.readouterr().out == "§cHi &z\n"

    def test_placeholder(self, capsys):
        assert main(["--placeholder", "$", "colorize", "$aok"]) == 0
        assert capsys.readouterr().out == "§aok\n"

    def test_tokenize(self, capsys):
        assert main(["tokenize", "§cA"]) == 0
        assert capsys.readouterr().out == "'§c'\n'A'\n"

    def test_clean(self, capsys):
        assert main(["clean", "§cA\x1b[0m"]) == 0
        assert capsys.readouterr().out == "A\n"

    def test_clean_keep_format(self, capsys):
        assert main(["clean", "--keep-format", "§cA\x1b[0m"]) == 0
        assert capsys.readouterr().out == "§cA\n"

    def test_base(self, capsys):
        assert main(["base", "-f", "&c", "Hi §rthere"]) == 0
        assert capsys.readouterr().out == "§r§cHi §r§cthere\n"

    def test_base_invalid(self, capsys):
        assert main(["base", "--format", "plain", "x"]) == 1
        assert capsys.readouterr().out == ""

    def test_ansi(self, capsys):
        assert main(["ansi", "§lB"]) == 0
        assert capsys.readouterr().out == "\033[1mB\033[0m\n"

    def test_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("§lB"))
        assert main(["html"]) == 0
        assert capsys.readouterr().out == "<span style=font-weight:bold>B</span>\n"

    def test_config_base_format(self, tmp_path, capsys, monkeypatch):
        path = tmp_path / "tf.yaml"
        path.write_text('base_format: "&9"\n', encoding="utf-8")
        assert main(["--config", str(path), "base", "x"]) == 0
        assert capsys.readouterr().out == "§r§9x\n"

    def test_bad_config(self, tmp_path):
        path = tmp_path / "tf.yaml"
        path.write_text("just a string\n", encoding="utf-8")
        assert main(["--config", str(path), "html", "x"]) == 1

    def test_config_wrong_type(self, tmp_path, capsys):
        path = tmp_path / "tf.yaml"
        path.write_text("placeholder: 1\n", encoding="utf-8")
        assert main(["--config", str(path), "colorize", "1c"]) == 1
        assert capsys.readouterr().out == ""

    def test_base_default_format(self, capsys):
        assert main(["base", "a§rb"]) == 0
        assert capsys.readouterr().out == "§ra§rb\n"
