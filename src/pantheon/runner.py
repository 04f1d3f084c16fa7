"""Re-execute the running program and relay termination signals to it."""

from __future__ import annotations

import os
import shutil
import signal
import subprocess
import sys
import threading
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Protocol

from loguru import logger

from pantheon.errors import ExecutableResolutionError, OrchestrationError, SpawnError

FORWARDED_SIGNALS: tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM)


class ChildProcess(Protocol):
    pid: int

    def wait(self) -> int: ...

    def send_signal(self, signum: int) -> None: ...


class Invoker(Protocol):
    """Start a child process from a full argument vector."""

    def spawn(self, argv: Sequence[str]) -> ChildProcess: ...


class PopenInvoker:
    """Spawn children that share this process's stdin, stdout and stderr."""

    def spawn(self, argv: Sequence[str]) -> ChildProcess:
        # The argument vector is rebuilt from validated pantheon commands.
        return subprocess.Popen(list(argv))  # noqa: S603


def _main_module(path: str) -> str | None:
    """Name of the package whose ``__main__`` module is running from ``path``."""

    spec = getattr(sys.modules.get("__main__"), "__spec__", None)
    if spec is None or not spec.name or not spec.origin:
        return None
    if os.path.abspath(spec.origin) != path:
        return None
    return spec.name.removesuffix(".__main__")


def resolve_executable(override: str | None = None) -> list[str]:
    """Return the command prefix that starts the running program again."""

    if override:
        located = shutil.which(override)
        if located is None:
            raise ExecutableResolutionError(f"failed to get current executable: {override} not found")
        return [located]

    entry = sys.argv[0] if sys.argv else ""
    if not entry or entry == "-c":
        raise ExecutableResolutionError("failed to get current executable: no program path in argv")

    located = shutil.which(entry) if os.sep not in entry else os.path.abspath(entry)
    if located is None or not os.path.isfile(located):
        raise ExecutableResolutionError(f"failed to get current executable: {entry}")
    if located.endswith(".py"):
        # A `python -m pkg` run must be repeated with -m to keep package imports intact.
        module = _main_module(located)
        if module:
            return [sys.executable, "-m", module]
        return [sys.executable, located]
    return [located]


def exit_status(returncode: int) -> int:
    """Map a Popen return code onto a process exit status."""

    # Popen reports death by signal N as -N.
    if returncode < 0:
        return 128 - returncode
    return returncode


class SignalRelay:
    """Signal handler that forwards to the child once one has been spawned."""

    def __init__(self) -> None:
        self.child: ChildProcess | None = None

    def __call__(self, signum: int, _frame: object) -> None:
        child = self.child
        if child is None:
            logger.debug("pantheon.signal.dropped signal={} reason=no-child", signum)
            return
        try:
            child.send_signal(signum)
        except OSError as exc:
            # The child may already be gone.
            logger.debug("pantheon.signal.forward_failed pid={} signal={} error={}", child.pid, signum, exc)
            return
        logger.debug("pantheon.signal.forward pid={} signal={}", child.pid, signum)


@contextmanager
def forward_signals(signals: Sequence[signal.Signals] = FORWARDED_SIGNALS) -> Iterator[SignalRelay]:
    """Relay ``signals`` to the child attached to the yielded relay while the block runs."""

    relay = SignalRelay()
    if threading.current_thread() is not threading.main_thread():
        logger.debug("pantheon.signal.disabled reason=not-main-thread")
        yield relay
        return

    previous = {signum: signal.getsignal(signum) for signum in signals}
    try:
        for signum in signals:
            signal.signal(signum, relay)
        yield relay
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler if handler is not None else signal.SIG_DFL)


class SubprocessRunner:
    """Run one native command as a child of the running program."""

    def __init__(self, invoker: Invoker | None = None, *, executable: str | None = None) -> None:
        self._invoker = invoker or PopenInvoker()
        self._executable = executable

    def run(self, args: Sequence[str]) -> int:
        """Spawn the child, relay signals until it exits, and return its exit status."""

        argv = [*resolve_executable(self._executable), *args]
        logger.debug("pantheon.exec argv={}", argv)
        with forward_signals() as relay:
            try:
                child = self._invoker.spawn(argv)
            except OSError as exc:
                raise SpawnError(f"failed to start {argv[0]}: {exc}") from exc
            relay.child = child
            try:
                returncode = child.wait()
            except OSError as exc:
                raise OrchestrationError(f"failed to wait for pid {child.pid}: {exc}") from exc

        status = exit_status(returncode)
        logger.debug("pantheon.exec.done pid={} status={}", child.pid, status)
        return status
