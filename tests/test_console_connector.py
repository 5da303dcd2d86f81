# tests/test_console_connector.py

from __future__ import annotations

import builtins

import pytest

from todo_list.connectors.console_connector import StdConsole


def test_read_line_uses_input(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[str] = []

    def fake_input(prompt: str = "") -> str:
        seen.append(prompt)
        return "42"

    monkeypatch.setattr(builtins, "input", fake_input)

    assert StdConsole().read_line("Number: ") == "42"
    assert seen == ["Number: "]


def test_write_prints_line(capsys: pytest.CaptureFixture[str]) -> None:
    StdConsole().write("hello")
    StdConsole().write()
    assert capsys.readouterr().out == "hello\n\n"


@pytest.mark.parametrize("enabled", [True, False])
def test_clear_is_silent_when_not_a_tty(capsys: pytest.CaptureFixture[str], enabled: bool) -> None:
    StdConsole(clear_screen=enabled).clear()
    assert capsys.readouterr().out == ""
