"""Action executors: run the commands attached to menu entries."""

import subprocess
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

from pickmenu.utils.debug import debug_action
from pickmenu.utils.exceptions import ActionExecutionError


class ResultKind(Enum):
    SEQUENCE = "sequence"
    OPAQUE = "opaque"


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of invoking an action.

    ``SEQUENCE`` results carry further choices for a nested menu;
    ``OPAQUE`` results only mean the side effect happened.
    """

    kind: ResultKind
    items: tuple[str, ...] = ()
    returncode: int = 0

    @classmethod
    def sequence(cls, items) -> "ExecutionResult":
        return cls(ResultKind.SEQUENCE, tuple(items))

    @classmethod
    def opaque(cls, returncode: int = 0) -> "ExecutionResult":
        return cls(ResultKind.OPAQUE, returncode=returncode)


class ActionExecutor(Protocol):
    """Protocol for action executors.

    Allows swapping how entry actions run (shell, scripted tests, ...).
    """

    def invoke(self, action: str, nested: bool = False) -> ExecutionResult:
        """Run action; nested=True asks for a SEQUENCE of further choices."""
        ...


class ShellActionExecutor:
    """Runs actions as shell commands."""

    def __init__(self, shell: Optional[str] = None):
        """
        Args:
            shell: Shell executable; None uses the system shell (/bin/sh)
        """
        self.shell = shell

    def _run(self, action: str, capture: bool) -> subprocess.CompletedProcess:
        if self.shell:
            args, use_shell = [self.shell, "-c", action], False
        else:
            args, use_shell = action, True
        try:
            return subprocess.run(
                args,
                shell=use_shell,
                capture_output=capture,
                text=True,
            )
        except OSError as e:
            raise ActionExecutionError(f"Could not run {action!r}: {e}") from e

    def invoke(self, action: str, nested: bool = False) -> ExecutionResult:
        debug_action("invoke", action=action, nested=nested)
        result = self._run(action, capture=nested)

        if result.returncode != 0:
            detail = (result.stderr or "").strip() if nested else ""
            message = f"{action!r} exited with status {result.returncode}"
            if detail:
                message += f": {detail}"
            raise ActionExecutionError(message, returncode=result.returncode)

        if not nested:
            return ExecutionResult.opaque(result.returncode)

        items = [line.strip() for line in result.stdout.splitlines()]
        return ExecutionResult.sequence(item for item in items if item)
