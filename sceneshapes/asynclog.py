"""Asynchronous logger writing to the console and to daily rolling files."""

from __future__ import annotations

import enum
import os
import queue
import socket
import sys
import threading
import time
from datetime import datetime
from pathlib import Path
from typing import TextIO

ROLL_SIZE = 1000 * 1000 * 1000
ROLL_PER_SECONDS = 60 * 60 * 24
FLUSH_INTERVAL = 5.0

_STOP = object()


class Orientation(enum.IntEnum):
    """Where log messages go."""

    STD = 1
    FILE = 2
    STD_AND_FILE = 3


class LogLevel(enum.IntEnum):
    DEBUG = 0
    WARNING = 1
    CRITICAL = 2
    FATAL = 3
    INFO = 4


_LEVEL_LABELS = {
    LogLevel.DEBUG: "Debug",
    LogLevel.WARNING: "Warning",
    LogLevel.CRITICAL: "Critica",
    LogLevel.FATAL: "Fatal",
    LogLevel.INFO: "Info",
}


def log_file_name(log_path: str, app_name: str, seconds: float) -> str:
    """Name of the log file started at ``seconds`` since the epoch."""
    stamp = datetime.fromtimestamp(seconds).strftime("%Y-%m-%d-%H-%M-%S")
    return f"{log_path}/{app_name}.{stamp}.{socket.gethostname()}.{os.getpid()}.log"


def format_message(
    level: LogLevel, message: str, file: str | None = None, line: int | None = None
) -> str:
    """One log line with timestamp, thread id, level and optional source location."""
    now = datetime.now()
    stamp = now.strftime("%Y-%m-%d %H:%M:%S.") + f"{now.microsecond // 1000:03d}"
    thread_id = f"{threading.get_ident():05d}"
    label = f"{_LEVEL_LABELS.get(level, 'Unknown'):<7}"
    context = f"File:({file}) Line:({line})" if file is not None else ""
    return f"{stamp} {thread_id} [{label}] {message} - {context}\n"


class RollingFile:
    """A log file that starts anew each day and whenever it grows past ``ROLL_SIZE``."""

    def __init__(
        self,
        log_path: str,
        app_name: str,
        auto_delete: bool = False,
        auto_delete_days: int = 7,
    ) -> None:
        self.log_path = log_path
        self.app_name = app_name
        self.auto_delete = auto_delete
        self.auto_delete_days = auto_delete_days
        self.file_name: str | None = None
        self._file: TextIO | None = None
        self._start_time = 0
        self._last_roll = 0
        self._count = 0
        self._roll(0)

    def __enter__(self) -> RollingFile:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _size(self) -> int:
        if self.file_name is None:
            return 0
        try:
            return os.path.getsize(self.file_name)
        except OSError:
            return 0

    def _delete_old_files(self) -> None:
        directory = Path(self.log_path)
        if not directory.is_dir():
            return
        limit = time.time() - self.auto_delete_days * ROLL_PER_SECONDS
        for entry in directory.iterdir():
            if entry.is_file() and entry.stat().st_mtime <= limit:
                entry.unlink()

    def _roll(self, count: int) -> bool:
        now = int(time.time())
        name = log_file_name(self.log_path, self.app_name, now)
        if count:
            name += f".{count}"
        elif self.auto_delete:
            self._delete_old_files()
        if now <= self._last_roll:
            return False
        self._start_time = now // ROLL_PER_SECONDS * ROLL_PER_SECONDS
        self._last_roll = now
        if self._file is not None:
            self._file.close()
        os.makedirs(self.log_path, exist_ok=True)
        self._file = open(name, "a", encoding="utf-8")
        self.file_name = name
        print(name, file=sys.stderr)
        return True

    def write(self, msg: str) -> None:
        if self._size() > ROLL_SIZE:
            self._count += 1
            self._roll(self._count)
        else:
            now = int(time.time())
            if now // ROLL_PER_SECONDS * ROLL_PER_SECONDS != self._start_time:
                self._count = 0
                self._roll(0)
        if self._file is not None:
            self._file.write(msg)

    def flush(self) -> None:
        if self._file is not None:
            self._file.flush()

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None


class AsyncLog:
    """Formats messages in the caller's thread and writes files from a worker thread."""

    _instance: AsyncLog | None = None
    _instance_lock = threading.Lock()

    def __init__(self) -> None:
        self.log_path = "."
        self.app_name = Path(sys.argv[0]).stem if sys.argv and sys.argv[0] else "python"
        self.auto_delete = False
        self.auto_delete_days = 7
        self.level = LogLevel.WARNING
        self.orientation = Orientation.STD
        self._queue: queue.Queue[object] = queue.Queue()
        self._thread: threading.Thread | None = None
        self._ready = threading.Event()
        self._error: BaseException | None = None

    @classmethod
    def instance(cls) -> AsyncLog:
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the file-writing thread and wait until it is ready."""
        if self.is_running:
            return
        self._ready.clear()
        self._error = None
        self._thread = threading.Thread(target=self._run, name="AsyncLog", daemon=True)
        self._thread.start()
        self._ready.wait()
        if self._error is not None:
            self._thread.join()
            self._thread = None
            raise self._error

    def stop(self) -> None:
        """Write out queued messages and end the worker thread."""
        if not self.is_running:
            return
        self._queue.put(_STOP)
        assert self._thread is not None
        self._thread.join()
        self._thread = None

    def log(
        self, level: LogLevel, message: str, file: str | None = None, line: int | None = None
    ) -> None:
        if level < self.level:
            return
        text = format_message(level, message, file, line)
        stream = sys.stdout if level in (LogLevel.DEBUG, LogLevel.INFO) else sys.stderr
        if self.orientation is not Orientation.FILE:
            stream.write(text)
            stream.flush()
        if self.orientation in (Orientation.FILE, Orientation.STD_AND_FILE) and self.is_running:
            self._queue.put(text)

    def _run(self) -> None:
        try:
            rolling = RollingFile(
                self.log_path, self.app_name, self.auto_delete, self.auto_delete_days
            )
        except BaseException as exc:
            self._error = exc
            self._ready.set()
            return
        with rolling:
            self._ready.set()
            last_flush = time.monotonic()
            while True:
                try:
                    item = self._queue.get(timeout=FLUSH_INTERVAL)
                except queue.Empty:
                    rolling.flush()
                    last_flush = time.monotonic()
                    continue
                if item is _STOP:
                    break
                rolling.write(str(item))
                if time.monotonic() - last_flush >= FLUSH_INTERVAL:
                    rolling.flush()
                    last_flush = time.monotonic()