"""Application services."""

from lanyard.application.services.external_profile_lookup_service import (
    ExternalProfileLookupService,
    ProfileLookupResult,
)
from lanyard.application.services.model_resolver import (
    PREFERRED_MODELS,
    ModelResolver,
    choose_model,
    is_model_unavailable,
)
from lanyard.application.services.profile_enrichment_service import (
    ProfileEnrichmentService,
)

__all__ = [
    "PREFERRED_MODELS",
    "ExternalProfileLookupService",
    "ModelResolver",
    "ProfileEnrichmentService",
    "ProfileLookupResult",
    "choose_model",
    "is_model_unavailable",
]
