# backend/itq_utils_app/services/platform_probe.py
import logging
import platform
from dataclasses import dataclass
from typing import Optional, Callable

logger = logging.getLogger(__name__)

UNKNOWN_VERSION = "unknown"


@dataclass(frozen=True)
class PlatformInfo:
    label: str
    version: str

    def describe(self) -> str:
        return f"{self.label} {self.version}"


def _macos_version() -> str:
    return platform.mac_ver()[0]


def _ios_version() -> str:
    # platform.ios_ver() only exists on Python 3.13+
    ios_ver = getattr(platform, "ios_ver", None)
    if ios_ver is None:
        return platform.release()
    return ios_ver().release


def _linux_version() -> str:
    # Kernel build string, same as `uname -v`
    return platform.uname().version


def _windows_version() -> str:
    return platform.version()


# platform.system() -> (label, version reader)
PLATFORM_READERS = {
    "Darwin": ("macOS", _macos_version),
    "iOS": ("iOS", _ios_version),
    "iPadOS": ("iOS", _ios_version),
    "Linux": ("Linux", _linux_version),
    "Windows": ("Windows", _windows_version),
}


def detect_platform(system: Optional[str] = None,
                    label_override: Optional[str] = None,
                    version_override: Optional[str] = None) -> PlatformInfo:
    """
    Work out the platform label and OS version string of the running host.

    The version never comes back empty: a blank reading falls back to
    platform.release(), then to "unknown".
    """
    system = system if system is not None else platform.system()
    label, reader = PLATFORM_READERS.get(system, (system or "Unknown", platform.release))

    version = (version_override or "").strip()
    if not version:
        try:
            version = (reader() or "").strip()
        except Exception as e:
            logger.warning(f"Failed to read OS version for {system!r}: {e}")
            version = ""
    if not version:
        version = (platform.release() or "").strip() or UNKNOWN_VERSION

    return PlatformInfo(label=(label_override or "").strip() or label, version=version)


def make_probe(label_override: Optional[str] = None,
               version_override: Optional[str] = None) -> Callable[[], PlatformInfo]:
    """
    Return a zero-argument probe bound to the given overrides.
    """
    def probe() -> PlatformInfo:
        return detect_platform(label_override=label_override, version_override=version_override)
    return probe
