"""Tests for the terminal front ends."""

import re

import pytest

from cli import bot as bot_cli
from cli.generate import display_settings, main, run_session
from cli.uniformity import main as uniformity_main
from cli.uniformity import max_deviation, sample_frequencies
from rasputin.core.models import CharacterClass, Settings
from rasputin.utils.constants import CHARACTERS, MSG_NO_TYPE, MSG_TOO_LONG
from rasputin.utils.rng import create_rng


def _scripted(*lines: str):
    it = iter(lines)

    def fake_input(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return fake_input


class TestGenerateMain:
    def test_one_shot(self, capsys):
        assert main(["--length", "16", "--types", "lun", "--count", "3", "--seed", "1"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 3
        allowed = set(CHARACTERS["lowercase"] + CHARACTERS["uppercase"] + CHARACTERS["numeric"])
        for line in lines:
            assert len(line) == 16
            assert set(line) <= allowed

    def test_defaults(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out.strip()
        assert len(out) == 8
        assert out.islower()

    def test_seed_reproducible(self, capsys):
        main(["--types", "luns", "--length", "40", "--seed", "9"])
        first = capsys.readouterr().out
        main(["--types", "luns", "--length", "40", "--seed", "9"])
        assert capsys.readouterr().out == first

    @pytest.mark.parametrize(
        "argv,message",
        [
            (["--length", "0"], "at least"),
            (["--length", "513"], MSG_TOO_LONG),
            (["--length", "ten"], "whole number"),
            (["--types", "x"], "Unknown character type"),
            (["--types", ""], MSG_NO_TYPE),
        ],
    )
    def test_errors(self, capsys, argv, message):
        assert main(argv) == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert message in captured.err

    def test_notes(self, capsys):
        assert main(["--notes"]) == 0
        assert capsys.readouterr().out.startswith("lowercase: a b c")

    def test_notes_html(self, capsys):
        assert main(["--notes-html"]) == 0
        assert 'id="special-note-section"' in capsys.readouterr().out


class TestInteractiveSession:
    def test_display_settings(self):
        text = display_settings(Settings.default().toggled("n"))
        assert "[x] lowercase (l)" in text
        assert "[ ] uppercase (u)" in text
        assert "[x] numeric (n)" in text

    def test_toggle_length_generate(self, capsys):
        run_session(create_rng(4), _scripted("n", "l", "len 5", "g", "quit"))
        out = capsys.readouterr().out
        assert re.search(r"^  \d{5}$", out, re.M)

    def test_enter_generates(self, capsys):
        run_session(create_rng(4), _scripted(""))
        out = capsys.readouterr().out
        assert re.search(r"^  [a-z]{8}$", out, re.M)

    def test_no_type_then_continue(self, capsys):
        run_session(create_rng(4), _scripted("l", "g", "u", "g"))
        out = capsys.readouterr().out
        assert MSG_NO_TYPE in out
        assert re.search(r"^  [A-Z]{8}$", out, re.M)

    def test_bad_length_keeps_settings(self, capsys):
        run_session(create_rng(4), _scripted("len 999", "len", "g"))
        out = capsys.readouterr().out
        assert MSG_TOO_LONG in out
        assert "Usage: len <N>" in out
        assert re.search(r"^  [a-z]{8}$", out, re.M)

    def test_reset_notes_help_unknown(self, capsys):
        run_session(create_rng(4), _scripted("s", "reset", "notes", "help", "zz"))
        out = capsys.readouterr().out
        assert "numeric: 0 1 2" in out
        assert "Unknown action: zz" in out
        assert out.count("Actions:") == 2


class TestUniformity:
    def test_sample_frequencies_spans_chunks(self):
        counts = sample_frequencies([CharacterClass.NUMERIC], 1300, create_rng(1))
        assert sum(counts.values()) == 1300
        assert set(counts) <= set(CHARACTERS["numeric"])

    def test_max_deviation(self):
        pool = ["a", "b"]
        assert max_deviation({"a": 5, "b": 5}, pool, 10) == 0
        assert max_deviation({"a": 10}, pool, 10) == 1.0

    def test_numeric_passes(self, capsys):
        code = uniformity_main(["--samples", "10000", "--seed", "3", "--tolerance", "0.15"])
        assert code == 0
        out = capsys.readouterr().out
        assert "Pool size: 10" in out
        assert "OK" in out

    def test_zero_tolerance_fails(self, capsys):
        # 7 draws over 10 digits cannot be even
        assert uniformity_main(["--samples", "7", "--tolerance", "0", "--seed", "1"]) == 1
        assert "FAIL" in capsys.readouterr().out

    def test_bad_samples(self, capsys):
        assert uniformity_main(["--samples", "0"]) == 2


class TestBotMain:
    def test_requires_token(self, monkeypatch, capsys):
        monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)
        assert bot_cli.main([]) == 2
        assert "TELEGRAM_BOT_TOKEN" in capsys.readouterr().err

    def test_invalid_poll_timeout(self, monkeypatch, capsys):
        monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "T")
        monkeypatch.setenv("TELEGRAM_POLL_TIMEOUT", "abc")
        monkeypatch.setattr(bot_cli, "run_polling", lambda deps: None)
        assert bot_cli.main([]) == 2
        assert "Invalid TELEGRAM_POLL_TIMEOUT" in capsys.readouterr().err

    def test_runs_polling(self, monkeypatch):
        seen = {}

        def fake_run_polling(deps):
            seen["deps"] = deps

        monkeypatch.delenv("TELEGRAM_POLL_TIMEOUT", raising=False)
        monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "T")
        monkeypatch.setattr(bot_cli, "run_polling", fake_run_polling)
        assert bot_cli.main(["--seed", "1", "--log-level", "debug"]) == 0
        assert seen["deps"].telegram.poll_timeout >= 0
