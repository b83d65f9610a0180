"""
Platform detection for the launch service.

Maps the host OS and CPU architecture onto the platforms that ship a native
server build. Everything else runs the JAR.
"""

from __future__ import annotations

import logging
import platform
import sys

from cncf_advisor.core.launch.models import ArtifactKind, PlatformKey

logger = logging.getLogger(__name__)

# Platforms with a native build of the server
SUPPORT_MATRIX: dict[str, frozenset[str]] = {
    "linux": frozenset({"x64"}),
    "darwin": frozenset({"x64", "arm64"}),
    "win32": frozenset({"x64"}),
}

_ARCH_ALIASES = {
    "x86_64": "x64",
    "amd64": "x64",
    "x64": "x64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "ia32",
    "i686": "ia32",
    "x86": "ia32",
    "armv7l": "arm",
    "armv6l": "arm",
}


def normalize_os(name: str) -> str:
    """
    Normalize an OS identifier (``sys.platform`` style) to a matrix key.

    Examples:
        >>> normalize_os("linux")
        'linux'
        >>> normalize_os("cygwin")
        'win32'
    """
    name = name.lower()
    if name.startswith("linux"):
        return "linux"
    if name in ("win32", "cygwin", "msys", "windows"):
        return "win32"
    return name


def normalize_arch(machine: str) -> str:
    """
    Normalize a CPU architecture (``platform.machine()`` style).

    Unknown architectures are returned lower-cased.

    Examples:
        >>> normalize_arch("AMD64")
        'x64'
        >>> normalize_arch("aarch64")
        'arm64'
    """
    machine = machine.lower()
    return _ARCH_ALIASES.get(machine, machine)


def current_platform() -> PlatformKey:
    """Return the normalized platform of the running host."""
    return PlatformKey(os=normalize_os(sys.platform), arch=normalize_arch(platform.machine()))


def is_native_supported(key: PlatformKey) -> bool:
    """Whether a native build exists for ``key``. Unknown OSes are unsupported."""
    return key.arch in SUPPORT_MATRIX.get(key.os, frozenset())


def detect_artifact(key: PlatformKey | None = None) -> ArtifactKind:
    """
    Select the artifact kind for a platform.

    Args:
        key: Platform to check (defaults to the current host)

    Returns:
        ArtifactKind.NATIVE when a native build exists, otherwise
        ArtifactKind.JAR, which runs anywhere a Java runtime is installed.
    """
    if key is None:
        key = current_platform()
    kind = ArtifactKind.NATIVE if is_native_supported(key) else ArtifactKind.JAR
    logger.debug("Platform %s -> %s artifact", key, kind.value)
    return kind


__all__ = [
    "SUPPORT_MATRIX",
    "current_platform",
    "detect_artifact",
    "is_native_supported",
    "normalize_arch",
    "normalize_os",
]
