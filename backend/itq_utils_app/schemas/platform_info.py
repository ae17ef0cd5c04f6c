# backend/itq_utils_app/schemas/platform_info.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List, Optional


class AppMetadata(BaseModel):
    """
    Identity and version of the hosting application.
    Every field is a string; missing values are "".
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    app_name: str = Field("", alias="appName")
    package_name: str = Field("", alias="packageName")
    version_code: str = Field("", alias="versionCode")
    version_name: str = Field("", alias="versionName")

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


class PlatformVersionDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    platform_version: str = Field(..., alias="platformVersion")


class MethodCallDTO(BaseModel):
    method: str = Field(..., min_length=1)
    arguments: Optional[Any] = None


class MethodResultDTO(BaseModel):
    method: str
    result: Any


class MethodListDTO(BaseModel):
    channel: str
    methods: List[str]
