# backend/itq_utils_app/api/deps.py
from fastapi import Request

from backend.itq_utils_app.core.config import Settings, settings
from backend.itq_utils_app.services.bundle_metadata import BundleMetadataSource
from backend.itq_utils_app.services.platform_info_service import PlatformInfoService
from backend.itq_utils_app.services.platform_probe import make_probe


def build_platform_info_service(cfg: Settings) -> PlatformInfoService:
    return PlatformInfoService(
        probe=make_probe(cfg.PLATFORM_LABEL, cfg.OS_VERSION),
        metadata_source=BundleMetadataSource(
            info_plist_path=cfg.INFO_PLIST_PATH,
            defaults=cfg.bundle_defaults(),
        ),
    )

# -----------------------
# Service Dependencies
# -----------------------

def get_platform_info_service(request: Request) -> PlatformInfoService:
    svc = getattr(request.app.state, "platform_info", None)
    if svc is None:
        # lifespan not run (e.g. app used without a TestClient context)
        svc = build_platform_info_service(settings)
        request.app.state.platform_info = svc
    return svc
