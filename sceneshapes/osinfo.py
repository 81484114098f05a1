"""Facts about the host operating system and per-OS conventions."""

from __future__ import annotations

import enum
import os
import platform
import sys

WIN_EXE_SUFFIX = ".exe"


class OsType(enum.Enum):
    WINDOWS = "windows"
    LINUX = "linux"
    MAC = "mac"
    OTHER_UNIX = "other_unix"
    OTHER = "other"


class CaseSensitivity(enum.Enum):
    INSENSITIVE = "insensitive"
    SENSITIVE = "sensitive"


class KeyboardModifier(enum.Enum):
    CONTROL = "control"
    META = "meta"


class HostArchitecture(enum.Enum):
    X86 = "x86"
    AMD64 = "amd64"
    ITANIUM = "itanium"
    ARM = "arm"
    ARM64 = "arm64"
    UNKNOWN = "unknown"


_PATH_LIST_SEPARATORS = {OsType.WINDOWS: ";"}
_DEFAULT_PATH_LIST_SEPARATOR = ":"


def with_executable_suffix(os_type: OsType, executable: str) -> str:
    """Append the executable suffix on Windows if it is missing."""
    if os_type is OsType.WINDOWS and not executable.endswith(WIN_EXE_SUFFIX):
        return executable + WIN_EXE_SUFFIX
    return executable


def file_name_case_sensitivity(os_type: OsType) -> CaseSensitivity:
    if os_type in (OsType.WINDOWS, OsType.MAC):
        return CaseSensitivity.INSENSITIVE
    return CaseSensitivity.SENSITIVE


def env_var_case_sensitivity(os_type: OsType) -> CaseSensitivity:
    return file_name_case_sensitivity(os_type)


def path_list_separator(os_type: OsType) -> str:
    """Separator between entries of a PATH-like list for ``os_type``.

    Accepts an :class:`OsType` or its value; raises ValueError for anything else.
    """
    kind = OsType(os_type)
    return _PATH_LIST_SEPARATORS.get(kind, _DEFAULT_PATH_LIST_SEPARATOR)


def control_modifier(os_type: OsType) -> KeyboardModifier:
    return KeyboardModifier.META if os_type is OsType.MAC else KeyboardModifier.CONTROL


def path_with_native_separators(os_type: OsType, path_name: str) -> str:
    """Convert path separators to the ones native to ``os_type``."""
    if os_type is OsType.WINDOWS:
        return path_name.replace("/", "\\")
    return path_name.replace("\\", "/")


_WINDOWS_ARCHITECTURES = {
    "AMD64": HostArchitecture.AMD64,
    "X86": HostArchitecture.X86,
    "IA64": HostArchitecture.ITANIUM,
    "ARM": HostArchitecture.ARM,
    "ARM64": HostArchitecture.ARM64,
}


class HostOsInfo:
    """Queries about the operating system this process runs on."""

    _override_case_sensitivity: CaseSensitivity | None = None

    @staticmethod
    def host_os() -> OsType:
        name = sys.platform
        if name.startswith("win"):
            return OsType.WINDOWS
        if name.startswith("linux"):
            return OsType.LINUX
        if name == "darwin":
            return OsType.MAC
        if os.name == "posix":
            return OsType.OTHER_UNIX
        return OsType.OTHER

    @staticmethod
    def host_architecture() -> HostArchitecture:
        """Processor architecture; only determined on Windows hosts."""
        if HostOsInfo.host_os() is not OsType.WINDOWS:
            return HostArchitecture.UNKNOWN
        return _WINDOWS_ARCHITECTURES.get(platform.machine().upper(), HostArchitecture.UNKNOWN)

    @staticmethod
    def is_windows_host() -> bool:
        return HostOsInfo.host_os() is OsType.WINDOWS

    @staticmethod
    def is_linux_host() -> bool:
        return HostOsInfo.host_os() is OsType.LINUX

    @staticmethod
    def is_mac_host() -> bool:
        return HostOsInfo.host_os() is OsType.MAC

    @staticmethod
    def is_any_unix_host() -> bool:
        return HostOsInfo.host_os() in (OsType.LINUX, OsType.MAC, OsType.OTHER_UNIX)

    @staticmethod
    def is_running_under_rosetta() -> bool:
        """Whether an x86-64 process runs translated on an ARM Mac."""
        if HostOsInfo.host_os() is not OsType.MAC:
            return False
        return platform.machine() == "x86_64" and "ARM64" in platform.version()

    @staticmethod
    def with_executable_suffix(executable: str) -> str:
        return with_executable_suffix(HostOsInfo.host_os(), executable)

    @classmethod
    def set_override_file_name_case_sensitivity(cls, sensitivity: CaseSensitivity) -> None:
        cls._override_case_sensitivity = sensitivity

    @classmethod
    def unset_override_file_name_case_sensitivity(cls) -> None:
        cls._override_case_sensitivity = None

    @classmethod
    def file_name_case_sensitivity(cls) -> CaseSensitivity:
        if cls._override_case_sensitivity is not None:
            return cls._override_case_sensitivity
        return file_name_case_sensitivity(cls.host_os())

    @staticmethod
    def path_list_separator() -> str:
        return path_list_separator(HostOsInfo.host_os())

    @staticmethod
    def control_modifier() -> KeyboardModifier:
        return control_modifier(HostOsInfo.host_os())

    @staticmethod
    def total_memory_installed_in_bytes() -> int | None:
        """Physical memory size, or None where it cannot be determined."""
        if HostOsInfo.host_os() not in (OsType.LINUX, OsType.MAC):
            return None
        try:
            total = os.sysconf("SC_PAGE_SIZE") * os.sysconf("SC_PHYS_PAGES")
        except (ValueError, OSError, AttributeError):
            return None
        return total if total > 0 else None