import logging
from typing import Any, Callable, Dict, Tuple
from backend.itq_utils_app.core.errors import UnsupportedOperationError
from backend.itq_utils_app.schemas.platform_info import AppMetadata
from backend.itq_utils_app.services.bundle_metadata import (
    BundleMetadataSource,
    BUNDLE_NAME_KEY,
    BUNDLE_IDENTIFIER_KEY,
    BUNDLE_VERSION_KEY,
    BUNDLE_SHORT_VERSION_KEY,
)
from backend.itq_utils_app.services.platform_probe import PlatformInfo

logger = logging.getLogger(__name__)

GET_PLATFORM_VERSION = "getPlatformVersion"
PACKAGE_INFO = "packageInfo"


def _text(bundle: Dict[str, Any], key: str) -> str:
    value = bundle.get(key)
    return value if isinstance(value, str) else ""


class PlatformInfoService:
    """
    Answers the itq_utils queries against the hosting environment.
    Transport-agnostic: the API layer only calls handle() or the two operations.
    Holds its collaborators only; results are computed fresh on every call.
    """
    def __init__(self, probe: Callable[[], PlatformInfo], metadata_source: BundleMetadataSource):
        self.probe = probe
        self.metadata_source = metadata_source
        self._handlers: Dict[str, Callable[[], Any]] = {
            GET_PLATFORM_VERSION: self.get_platform_version,
            PACKAGE_INFO: self.package_info,
        }


    def get_platform_version(self) -> str:
        return self.probe().describe()


    def package_info(self) -> AppMetadata:
        """
        Build the metadata record from the bundle. Absent or non-string
        values become "" instead of failing the call.
        """
        bundle = self.metadata_source.load()
        return AppMetadata(
            app_name=_text(bundle, BUNDLE_NAME_KEY),
            package_name=_text(bundle, BUNDLE_IDENTIFIER_KEY),
            version_code=_text(bundle, BUNDLE_VERSION_KEY),
            version_name=_text(bundle, BUNDLE_SHORT_VERSION_KEY),
        )


    def supported_methods(self) -> Tuple[str, ...]:
        return tuple(sorted(self._handlers))


    def handle(self, method: str, arguments: Any = None) -> Any:
        """
        Dispatch a named request. Neither known operation takes arguments,
        so they are accepted and ignored.
        Raises UnsupportedOperationError for any other name.
        """
        handler = self._handlers.get(method)
        if handler is None:
            logger.warning(f"Unsupported method requested: {method!r}")
            raise UnsupportedOperationError(method)

        logger.debug(f"Handling method {method!r}")
        return handler()
