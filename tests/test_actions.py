"""Tests for the shell action executor."""

import pytest

from pickmenu.core.actions import ExecutionResult, ResultKind, ShellActionExecutor
from pickmenu.utils.exceptions import ActionExecutionError


def test_nested_invocation_returns_output_lines():
    result = ShellActionExecutor().invoke("printf 'one\\n\\n  two  \\n'", nested=True)
    assert result.kind is ResultKind.SEQUENCE
    assert result.items == ("one", "two")


def test_inline_invocation_is_opaque(temp_dir):
    marker = temp_dir / "ran"
    result = ShellActionExecutor().invoke(f"touch '{marker}'")
    assert result.kind is ResultKind.OPAQUE
    assert result.returncode == 0
    assert marker.exists()


def test_failing_command_raises():
    with pytest.raises(ActionExecutionError) as exc:
        ShellActionExecutor().invoke("echo nope >&2; exit 3", nested=True)
    assert exc.value.returncode == 3
    assert "nope" in str(exc.value)


def test_failing_inline_command_raises():
    with pytest.raises(ActionExecutionError) as exc:
        ShellActionExecutor().invoke("exit 4")
    assert exc.value.returncode == 4


def test_explicit_shell():
    result = ShellActionExecutor(shell="/bin/sh").invoke("echo hi", nested=True)
    assert result.items == ("hi",)


def test_missing_shell_raises(temp_dir):
    executor = ShellActionExecutor(shell=str(temp_dir / "no-such-shell"))
    with pytest.raises(ActionExecutionError):
        executor.invoke("echo hi")


def test_result_constructors():
    assert ExecutionResult.sequence(["a"]) == ExecutionResult(ResultKind.SEQUENCE, ("a",))
    assert ExecutionResult.opaque(2).returncode == 2
