# backend/itq_utils_app/api/v1/platform_info.py
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from backend.itq_utils_app.core.config import settings
from backend.itq_utils_app.core.errors import UnsupportedOperationError
from backend.itq_utils_app.schemas.platform_info import (
    AppMetadata, MethodCallDTO, MethodResultDTO, MethodListDTO, PlatformVersionDTO
)
from backend.itq_utils_app.services.platform_info_service import PlatformInfoService
from backend.itq_utils_app.api.deps import get_platform_info_service

router = APIRouter(prefix=f"/api/v1/{settings.CHANNEL_NAME}", tags=[settings.CHANNEL_NAME])
logger = logging.getLogger(__name__)


@router.post("/invoke", response_model=MethodResultDTO)
def invoke(payload: MethodCallDTO, svc: PlatformInfoService = Depends(get_platform_info_service)):
    """
    Method-call entry point: the shell names a method, the service answers it.
    Unknown methods get 501 with code 'notImplemented'.
    """
    try:
        result = svc.handle(payload.method, payload.arguments)
    except UnsupportedOperationError as e:
        raise HTTPException(
            status_code=status.HTTP_501_NOT_IMPLEMENTED,
            detail={
                "code": e.code,
                "method": e.method,
                "message": str(e)
            }
        )
    except Exception as e:
        logger.exception(f"Method {payload.method!r} failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to handle method call"
        )

    if isinstance(result, AppMetadata):
        result = result.to_dict()
    return MethodResultDTO(method=payload.method, result=result)


@router.get("/platform-version", response_model=PlatformVersionDTO)
def get_platform_version(svc: PlatformInfoService = Depends(get_platform_info_service)):
    try:
        return PlatformVersionDTO(platform_version=svc.get_platform_version())
    except Exception as e:
        logger.exception(f"Failed to read platform version: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to read platform version"
        )


@router.get("/package-info", response_model=AppMetadata)
def get_package_info(svc: PlatformInfoService = Depends(get_platform_info_service)):
    try:
        return svc.package_info()
    except Exception as e:
        logger.exception(f"Failed to read package info: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to read package info"
        )


@router.get("/methods", response_model=MethodListDTO)
def list_methods(svc: PlatformInfoService = Depends(get_platform_info_service)):
    return MethodListDTO(channel=settings.CHANNEL_NAME, methods=list(svc.supported_methods()))
