"""Credit charging, uploads and saving of transformed images."""

from collections.abc import Mapping
from dataclasses import replace
from typing import Any, Final, Literal

from imaginify.exceptions import SaveError, UploadError
from imaginify.integrations.interfaces import (
    IdentityProvider,
    ImageRecord,
    ImageRepository,
    ImageTransformService,
)
from imaginify.integrations.notifications import ensure_credits
from imaginify.logging_config import get_logger

logger = get_logger(__name__)

SaveAction = Literal["add", "update"]

# Record fields that must be filled in before an image can be stored.
_REQUIRED_FIELDS: Final = ("title", "public_id", "secure_url", "transformation_type")


def charge_credits(identity: IdentityProvider, user_id: str, fee: int) -> int:
    """Deduct a transformation fee from a user's balance.

    Returns:
        The balance after the charge.

    Raises:
        InsufficientCreditsError: If the balance does not cover the fee.
    """
    ensure_credits(identity.credit_balance(user_id), fee)
    balance = identity.update_credits(user_id, -abs(fee))
    logger.info("credits_charged", user_id=user_id, fee=abs(fee), balance=balance)
    return balance


def apply_upload(record: ImageRecord, info: Mapping[str, Any]) -> ImageRecord:
    """Copy an upload service result onto a record.

    ``info`` is the service's result payload: ``public_id``, ``secure_url``,
    ``width`` and ``height``.

    Raises:
        UploadError: If the result has no public id or URL.
    """
    missing = [key for key in ("public_id", "secure_url") if not info.get(key)]
    if missing:
        raise UploadError(
            "Upload result is incomplete",
            context={"image_id": record.image_id, "missing": missing},
        )

    uploaded = replace(
        record,
        public_id=info["public_id"],
        secure_url=info["secure_url"],
        width=info.get("width"),
        height=info.get("height"),
    )
    logger.info("image_uploaded", image_id=record.image_id, public_id=uploaded.public_id)
    return uploaded


def save_transformation(
    repository: ImageRepository,
    transformer: ImageTransformService,
    record: ImageRecord,
    action: SaveAction = "add",
) -> ImageRecord:
    """Attach the transformed URL to a record and store it.

    ``action="update"`` replaces an image that is already stored.

    Raises:
        SaveError: If a required field is empty, the record has no
            dimensions, or there is no stored image to update.
    """
    for name in _REQUIRED_FIELDS:
        if not getattr(record, name):
            raise SaveError(
                f"Image {name} is required",
                context={"image_id": record.image_id, "field": name},
            )
    if record.width is None or record.height is None:
        raise SaveError(
            "Image dimensions are unknown",
            context={"image_id": record.image_id},
        )

    url = transformer.transformation_url(
        record.public_id, record.width, record.height, record.config
    )
    transformed = replace(record, transformation_url=url)
    if action == "update":
        if repository.get(record.image_id) is None:
            raise SaveError("Image not found", context={"image_id": record.image_id})
        saved = repository.update(transformed)
    else:
        saved = repository.add(transformed)

    logger.info(
        "transformation_saved",
        image_id=saved.image_id,
        transformation_type=saved.transformation_type,
        action=action,
    )
    return saved
