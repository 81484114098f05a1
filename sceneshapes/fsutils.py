"""File-system, configuration-location and process helpers."""

from __future__ import annotations

import json
import logging
import os
import platform
import signal
import socket
from pathlib import Path
from typing import Any

import platformdirs

logger = logging.getLogger(__name__)

_UNITS = ("B", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
_UNIT = 1024


def config_location(app_name: str) -> str:
    """Per-user configuration directory of ``app_name``, created if missing.

    Falls back to the home directory when no configuration location is known.
    """
    path = platformdirs.user_config_dir(app_name)
    if not path:
        path = str(Path.home())
    generate_directories(path)
    return path


def _sub_location(app_name: str, name: str) -> str:
    path = os.path.join(config_location(app_name), name)
    generate_directories(path)
    return path


def crash_path(app_name: str) -> str:
    """Directory for crash dumps, created if missing."""
    return _sub_location(app_name, "crash")


def log_path(app_name: str) -> str:
    """Directory for log files, created if missing."""
    return _sub_location(app_name, "log")


def config_path(app_name: str) -> str:
    """Directory for configuration files, created if missing."""
    return _sub_location(app_name, "config")


def config_file_path(app_name: str) -> str:
    """Path of the main configuration file."""
    return os.path.join(config_path(app_name), "config.ini")


def system_info() -> str:
    """Two lines describing the operating system, machine and interpreter."""
    first = (
        f"{platform.platform()} ({platform.release()}) on {platform.machine()} "
        f"({socket.gethostname()}) with CPU Cores: {os.cpu_count() or 1}"
    )
    second = (
        f"Build with: Python {platform.python_version()} "
        f"({platform.python_compiler()}, {platform.architecture()[0]})"
    )
    return f"{first}\n{second}"


def _directory_size(path: str) -> int:
    total = 0
    try:
        entries = list(os.scandir(path))
    except OSError:
        return 0
    for entry in entries:
        try:
            if entry.is_dir():
                total += _directory_size(entry.path)
            else:
                total += entry.stat().st_size
        except OSError:
            continue
    return total


def file_size(path: str | os.PathLike[str]) -> int:
    """Size in bytes of a file, or the total of everything inside a directory.

    A path that does not exist has size 0.
    """
    path = os.fspath(path)
    if os.path.isdir(path):
        return _directory_size(path)
    try:
        return os.path.getsize(path)
    except OSError:
        return 0


def generate_directories(directory: str | os.PathLike[str]) -> bool:
    """Create ``directory`` and its parents; report whether it exists afterwards."""
    try:
        os.makedirs(directory, exist_ok=True)
    except OSError:
        return False
    return True


def _remove_link_or_file(path: Path) -> None:
    try:
        path.unlink()
    except OSError as exc:
        logger.warning('Cannot remove file "%s": %s', os.path.normpath(path), exc)


def remove_directory(path: str | os.PathLike[str]) -> None:
    """Delete a directory tree; symbolic links are removed, never followed.

    An empty path is ignored so that the working directory is never removed.
    Failures are logged as warnings and the rest of the tree is still removed.
    """
    if not os.fspath(path):
        return
    root = Path(path)
    if not root.is_dir() or root.is_symlink():
        return
    for dirpath, dirnames, filenames in os.walk(root, topdown=False):
        base = Path(dirpath)
        for name in filenames:
            _remove_link_or_file(base / name)
        for name in dirnames:
            child = base / name
            if child.is_symlink():
                _remove_link_or_file(child)
                continue
            try:
                child.rmdir()
            except OSError as exc:
                logger.warning('Cannot remove directory "%s": %s', os.path.normpath(child), exc)
    try:
        root.rmdir()
    except OSError as exc:
        logger.warning('Cannot remove directory "%s": %s', os.path.normpath(root), exc)


def convert_bytes_to_string(size: int) -> str:
    """Human-readable size with two decimals in binary units, such as ``1.50 KB``."""
    value = float(size)
    index = 0
    while value >= _UNIT and index < len(_UNITS) - 1:
        value /= _UNIT
        index += 1
    return f"{value:.2f} {_UNITS[index]}"


def json_from_bytes(data: bytes | str) -> dict[str, Any]:
    """Parse a JSON document; a document that is not an object yields ``{}``.

    Raises ``json.JSONDecodeError`` (a ``ValueError``) for malformed input.
    """
    document = json.loads(data)
    if not isinstance(document, dict):
        return {}
    return document


def json_from_file(path: str | os.PathLike[str]) -> dict[str, Any]:
    """Parse the JSON object stored in ``path``; raises ``OSError`` if unreadable."""
    with open(path, "rb") as handle:
        data = handle.read()
    return json_from_bytes(data)


def kill_process(pid: int) -> bool:
    """Ask the process ``pid`` to terminate; report whether the request was delivered."""
    logger.warning("kill process: %s", pid)
    if pid <= 0:
        return False
    try:
        os.kill(pid, signal.SIGTERM)
    except (OSError, OverflowError):
        return False
    return True