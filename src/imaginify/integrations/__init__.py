from imaginify.integrations.interfaces import (
    IdentityProvider,
    ImageRecord,
    ImageRepository,
    ImageTransformService,
    Toast,
    ToastSink,
)
from imaginify.integrations.notifications import (
    ensure_credits,
    success_toast,
    surface_errors,
)
from imaginify.integrations.transformations import (
    apply_upload,
    charge_credits,
    save_transformation,
)

__all__ = [
    "IdentityProvider",
    "ImageRecord",
    "ImageRepository",
    "ImageTransformService",
    "Toast",
    "ToastSink",
    "apply_upload",
    "charge_credits",
    "ensure_credits",
    "save_transformation",
    "success_toast",
    "surface_errors",
]
