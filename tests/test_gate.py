"""Tests for InteractiveGate"""
import io

import pytest
from rich.console import Console

from git_tools.core import DIRTY_PROMPT, dirty_warning
from git_tools.services.gate import InteractiveGate


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def gate_console(output):
    return Console(file=output, width=40)


class TestInteractiveGate:
    """Test the confirmation checkpoint."""

    def test_disabled_gate_does_not_prompt(self, gate_console, output, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda *args: pytest.fail("prompted"))

        InteractiveGate(enabled=False, output=gate_console).confirm(["message"], "prompt")

        assert output.getvalue() == ""

    def test_prints_message_and_prompt_verbatim(self, gate_console, output, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda *args: "")
        lines = dirty_warning("/tmp/checkout")

        InteractiveGate(enabled=True, output=gate_console).confirm(lines, DIRTY_PROMPT)

        # narrow console, but nothing is wrapped and [enter] is not treated as markup
        assert output.getvalue() == f"{lines[0]}\n{DIRTY_PROMPT}"

    def test_any_input_confirms(self, gate_console, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda *args: "yes please")
        InteractiveGate(enabled=True, output=gate_console).confirm(["message"], "prompt")

    def test_interrupt_propagates(self, gate_console, monkeypatch):
        def interrupt(*args):
            raise KeyboardInterrupt

        monkeypatch.setattr("builtins.input", interrupt)

        with pytest.raises(KeyboardInterrupt):
            InteractiveGate(enabled=True, output=gate_console).confirm(["message"], "prompt")

    def test_closed_stdin_propagates(self, gate_console, monkeypatch):
        def closed(*args):
            raise EOFError

        monkeypatch.setattr("builtins.input", closed)

        with pytest.raises(EOFError):
            InteractiveGate(enabled=True, output=gate_console).confirm(["message"], "prompt")
