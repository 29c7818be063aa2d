"""Tests for output formatting."""

import io
import json

from rich.console import Console

from miniprof.output import OutputContext, get_output_context, set_output_context


def _console() -> tuple[Console, io.StringIO]:
    output = io.StringIO()
    return Console(file=output, force_terminal=False, width=40), output


class TestOutputContextPrint:
    """Tests for OutputContext.print method."""

    def test_print_in_normal_mode(self) -> None:
        """print should output message in normal mode."""
        console, output = _console()
        OutputContext(console=console).print("Hello world")
        assert "Hello world" in output.getvalue()

    def test_print_suppressed_in_json_mode(self) -> None:
        """print should be suppressed in json mode."""
        console, output = _console()
        OutputContext(console=console, json_mode=True).print("Hello world")
        assert output.getvalue() == ""


class TestOutputContextReport:
    """Tests for OutputContext.report method."""

    def test_report_is_verbatim(self) -> None:
        """Reports keep brackets, markers and long lines intact."""
        console, output = _console()
        text = "host at now\n>[bold]Query[/bold] = 1ms (sql = 1ms in 1 cmd) " + "x" * 60 + "\n"
        OutputContext(console=console).report(text)
        assert output.getvalue() == text

    def test_report_json_mode(self, capsys) -> None:
        """In json mode the report is wrapped in JSON."""
        ctx = OutputContext(console=Console(), json_mode=True)
        ctx.report("a = 1ms\n")
        data = json.loads(capsys.readouterr().out)
        assert data == {"report": "a = 1ms\n"}

    def test_report_json_mode_with_data(self, capsys) -> None:
        """Explicit data replaces the default JSON wrapper."""
        ctx = OutputContext(console=Console(), json_mode=True)
        ctx.report("a = 1ms\n", {"session_id": "s1", "report": "a = 1ms\n"})
        data = json.loads(capsys.readouterr().out)
        assert data["session_id"] == "s1"


class TestOutputContextError:
    """Tests for OutputContext.error method."""

    def test_error_normal_mode(self) -> None:
        """error should print a red message."""
        console, output = _console()
        OutputContext(console=console).error("broken")
        assert "Error: broken" in output.getvalue()

    def test_error_keeps_brackets(self) -> None:
        """Bracketed text in messages is not treated as markup."""
        console, output = _console()
        OutputContext(console=console).error("bad [type=enum] value")
        assert "bad [type=enum] value" in output.getvalue()

    def test_error_json_mode_with_data(self, capsys) -> None:
        """error should merge extra data in json mode."""
        ctx = OutputContext(console=Console(), json_mode=True)
        ctx.error("broken", {"path": "x.json"})
        data = json.loads(capsys.readouterr().out)
        assert data == {"error": "broken", "path": "x.json"}


class TestGlobalContext:
    """Tests for get/set_output_context."""

    def test_default_context(self) -> None:
        """A default context is returned before the CLI sets one."""
        set_output_context(None)  # type: ignore[arg-type]
        ctx = get_output_context()
        assert ctx.json_mode is False

    def test_set_context(self) -> None:
        """set_output_context replaces the global context."""
        ctx = OutputContext(console=Console(), json_mode=True)
        set_output_context(ctx)
        assert get_output_context() is ctx
        set_output_context(None)  # type: ignore[arg-type]
