import platform
from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version
from typing import MutableMapping

from .constants import (
    API_VERSION,
    DEFAULT_PACKAGE_VERSION,
    HEADER_API_VERSION,
    HEADER_ARCH,
    HEADER_LANG,
    HEADER_OS,
    HEADER_PACKAGE_VERSION,
    HEADER_RUNTIME,
    HEADER_RUNTIME_VERSION,
    PACKAGE_NAME,
    PRODUCT_NAME,
)

LANGUAGE = "python"

_OS_NAMES = {
    "windows": "windows",
    "linux": "linux",
    "darwin": "darwin",
}

_ARCHITECTURES = {
    "x86_64": "x86_64",
    "amd64": "x86_64",
    "x64": "x86_64",
    "i386": "x86",
    "i686": "x86",
    "x86": "x86",
    "arm64": "arm64",
    "aarch64": "arm64",
    "arm": "arm",
    "armv7l": "arm",
    "armv6l": "arm",
}


@lru_cache(maxsize=1)
def package_version() -> str:
    try:
        return version(PACKAGE_NAME)
    except PackageNotFoundError:
        return DEFAULT_PACKAGE_VERSION


def default_user_agent() -> str:
    return f"{PRODUCT_NAME}/v{package_version()}"


def os_name(system: str | None = None) -> str:
    system = platform.system() if system is None else system
    return _OS_NAMES.get(system.lower(), system or platform.platform())


def architecture(machine: str | None = None) -> str:
    machine = platform.machine() if machine is None else machine
    return _ARCHITECTURES.get(machine.lower(), machine.lower())


@lru_cache(maxsize=1)
def runtime_headers() -> dict[str, str]:
    """Diagnostic headers describing this SDK and the host it runs on."""
    return {
        HEADER_API_VERSION: API_VERSION,
        HEADER_LANG: LANGUAGE,
        HEADER_PACKAGE_VERSION: package_version(),
        HEADER_OS: os_name(),
        HEADER_ARCH: architecture(),
        HEADER_RUNTIME: platform.python_implementation().lower(),
        HEADER_RUNTIME_VERSION: platform.python_version(),
    }


def apply_runtime_headers(headers: MutableMapping[str, str]) -> None:
    for name, value in runtime_headers().items():
        headers[name] = value
