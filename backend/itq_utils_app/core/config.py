# backend/itq_utils_app/core/config.py
import os
from typing import Optional, List, Dict, Literal
from pydantic import BaseModel, ConfigDict


def _env(name: str) -> Optional[str]:
    """
    Return the environment value, treating an empty/whitespace value as unset.
    """
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return value.strip()


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    APP_TITLE: str = "ITQ Utils Platform Info API"
    API_VERSION: str = "1.0.0"
    CHANNEL_NAME: str = "itq_utils"

    HOST: str = "0.0.0.0"
    PORT: int = 8000
    CORS_ORIGINS: List[str] = ["*"]

    # Bundle metadata
    INFO_PLIST_PATH: Optional[str] = None
    APP_NAME: Optional[str] = None
    APP_PACKAGE_NAME: Optional[str] = None
    APP_VERSION_CODE: Optional[str] = None
    APP_VERSION_NAME: Optional[str] = None

    # Platform probe overrides
    PLATFORM_LABEL: Optional[str] = None
    OS_VERSION: Optional[str] = None

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_DIR: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from os.environ. Unset variables keep the defaults above.
        """
        values = {}
        for name in cls.model_fields:
            raw = _env(name)
            if raw is None:
                continue
            if name == "CORS_ORIGINS":
                values[name] = [o.strip() for o in raw.split(",") if o.strip()]
            elif name == "LOG_LEVEL":
                values[name] = raw.upper()
            else:
                values[name] = raw
        return cls(**values)

    def bundle_defaults(self) -> Dict[str, str]:
        """
        Fallback bundle values keyed the same way as an Info.plist.
        """
        pairs = {
            "CFBundleName": self.APP_NAME,
            "CFBundleIdentifier": self.APP_PACKAGE_NAME,
            "CFBundleVersion": self.APP_VERSION_CODE,
            "CFBundleShortVersionString": self.APP_VERSION_NAME,
        }
        return {k: v for k, v in pairs.items() if v is not None}


settings = Settings.from_env()
