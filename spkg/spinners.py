"""Terminal spinners shown while spkg waits on work."""

from __future__ import annotations

import itertools
import queue
import shutil
import sys
import threading
import time
from enum import Enum
from typing import TextIO

from spkg.spinner_frames import SpinnerData, SpinnerName, get_spinner
from spkg.utilities import C_RESET

_SIMPLE_FRAMES = (
    "\x1b[32m\x1b[1m  - \x1b[0m",
    "\x1b[32m\x1b[1m  \\ \x1b[0m",
    "\x1b[32m\x1b[1m  | \x1b[0m",
    "\x1b[32m\x1b[1m  / \x1b[0m",
)
_SIMPLE_INTERVAL = 0.11


class Stream(Enum):
    """The output a spinner draws on."""

    STDERR = "stderr"
    STDOUT = "stdout"

    def _target(self) -> TextIO:
        return sys.stderr if self is Stream.STDERR else sys.stdout

    def write(
        self,
        frame: str,
        message: str,
        start_time: float | None = None,
        stop_time: float | None = None,
    ) -> None:
        """Draw one frame; with a start time the elapsed seconds are shown as well."""
        out = self._target()
        if start_time is None:
            out.write(f"\r{frame} {message}")
        else:
            now = stop_time if stop_time is not None else time.monotonic()
            out.write(f"\r{frame}{now - start_time:>10.3f} s\t{message}")
        out.flush()

    def stop(self, message: str | None = None, symbol: str | None = None) -> None:
        """Finish the spinner line, persisting the message and symbol when given."""
        out = self._target()
        if message is not None and symbol is not None:
            out.write(f"\x1b[2K\r{symbol} {message}\n")
        elif message is not None:
            out.write(f"\x1b[2K\r{message}\n")
        else:
            out.write("\n")
        out.flush()


class Spinner:
    """An animated spinner drawn by a background thread until it is stopped."""

    def __init__(
        self,
        spinner: SpinnerName | str,
        message: str,
        timer: bool = False,
        stream: Stream = Stream.STDERR,
    ) -> None:
        data = get_spinner(spinner)
        self._stream = stream
        self._start_time = time.monotonic() if timer else None
        self._requests: queue.Queue[tuple[float, str | None]] = queue.Queue()
        self._thread: threading.Thread | None = threading.Thread(
            target=self._animate, args=(data, message), daemon=True
        )
        self._thread.start()

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _poll(self, timeout: float | None) -> tuple[float, str | None] | None:
        try:
            if timeout is None:
                return self._requests.get_nowait()
            return self._requests.get(timeout=timeout)
        except queue.Empty:
            return None

    def _animate(self, data: SpinnerData, message: str) -> None:
        interval = data.interval / 1000
        pending: tuple[float, str | None] | None = None
        for frame in itertools.cycle(data.frames):
            if pending is None:
                pending = self._poll(None)
            stop_time, symbol = pending if pending is not None else (None, None)
            self._stream.write(
                symbol if symbol is not None else frame, message, self._start_time, stop_time
            )
            if pending is not None:
                return
            pending = self._poll(interval)

    def _stop_inner(self, symbol: str | None) -> None:
        if self._thread is None:
            raise RuntimeError("spinner already stopped")
        self._requests.put((time.monotonic(), symbol))
        self._thread.join()
        self._thread = None

    def stop(self) -> None:
        """Stop the animation, leaving the last frame on the line."""
        self._stop_inner(None)

    def stop_with_symbol(self, symbol: str) -> None:
        """Stop, replacing the spinner frame with ``symbol``."""
        self._stop_inner(symbol)
        self._stream.stop(None, symbol)

    def stop_with_newline(self) -> None:
        self.stop()
        self._stream.stop(None, None)

    def stop_with_message(self, message: str) -> None:
        """Stop and replace the spinner line with ``message``."""
        self.stop()
        self._stream.stop(message, None)

    def stop_and_persist(self, symbol: str, message: str) -> None:
        """Stop and replace the spinner line with ``symbol`` and ``message``."""
        self.stop()
        self._stream.stop(message, symbol)

    def __enter__(self) -> Spinner:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._thread is not None:
            self.stop()


def truncate_text(text: str, width: int) -> str:
    """Shorten ``text`` to fit ``width`` columns, marking the cut with ``(...)``."""
    if len(text) > width:
        return f"{text[:max(width - 3, 0)]} {C_RESET}(...)"
    return text


class SimpleSpinner:
    """A line spinner in front of a text that is cut to the terminal width."""

    def __init__(self, output: TextIO | None = None) -> None:
        self._output = output
        self._thread: threading.Thread | None = None
        self._stopping = threading.Event()

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _out(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def start(self, text: object) -> None:
        """Start spinning in front of ``text``; a spinner already running is stopped first."""
        self.stop()
        self._stopping = threading.Event()
        self._thread = threading.Thread(
            target=self._spin, args=(str(text), self._stopping), daemon=True
        )
        self._thread.start()

    def _spin(self, text: str, stopping: threading.Event) -> None:
        out = self._out()
        width = shutil.get_terminal_size((80, 24)).columns - 3
        display = truncate_text(text, width)
        for frame in itertools.cycle(_SIMPLE_FRAMES):
            if stopping.is_set():
                break
            out.write(f"\r{frame} {display}")
            out.flush()
            stopping.wait(_SIMPLE_INTERVAL)
        out.write("\r ")
        out.flush()

    def stop(self) -> None:
        self._stopping.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def stop_with_message(self, message: object) -> None:
        self.stop()
        out = self._out()
        out.write(f"{message}\n")
        out.flush()