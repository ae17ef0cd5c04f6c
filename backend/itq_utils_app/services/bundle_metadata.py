# backend/itq_utils_app/services/bundle_metadata.py
"""
Reads the hosting application's bundle metadata.

Values come from an Info.plist file (XML or binary) when one is configured,
layered over fallback values supplied from settings. Keys follow the
Info.plist naming (CFBundleName, CFBundleIdentifier, ...).
"""
import logging
import plistlib
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)

BUNDLE_NAME_KEY = "CFBundleName"
BUNDLE_IDENTIFIER_KEY = "CFBundleIdentifier"
BUNDLE_VERSION_KEY = "CFBundleVersion"
BUNDLE_SHORT_VERSION_KEY = "CFBundleShortVersionString"


def read_info_plist(path: str) -> Dict[str, Any]:
    """
    Load an Info.plist. Returns {} (and logs a warning) when the file is
    missing, unreadable, malformed, or its root is not a dictionary.
    """
    try:
        with open(path, "rb") as fp:
            root = plistlib.load(fp)
    except FileNotFoundError:
        logger.warning(f"Info.plist not found at {path}")
        return {}
    except Exception as e:
        # plistlib raises ExpatError, ValueError or AttributeError on bad content
        logger.warning(f"Failed to read Info.plist at {path}: {e}")
        return {}

    if not isinstance(root, dict):
        logger.warning(f"Info.plist at {path} has a {type(root).__name__} root, expected a dictionary")
        return {}
    return root


class BundleMetadataSource:
    """
    Stateless reader: every load() re-reads the plist, nothing is cached.
    """
    def __init__(self, info_plist_path: Optional[str] = None,
                 defaults: Optional[Dict[str, Any]] = None):
        self.info_plist_path = info_plist_path
        self.defaults = dict(defaults or {})

    def load(self) -> Dict[str, Any]:
        bundle = dict(self.defaults)
        if self.info_plist_path:
            bundle.update(read_info_plist(self.info_plist_path))
        return bundle
