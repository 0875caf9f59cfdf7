from lanyard.presentation.api.routers.enrichment import router as enrichment_router
from lanyard.presentation.api.routers.onboarding import router as onboarding_router
from lanyard.presentation.api.routers.profiles import router as profiles_router

__all__ = [
    "enrichment_router",
    "onboarding_router",
    "profiles_router",
]
