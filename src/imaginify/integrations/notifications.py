"""Call-site error handling for external collaborators.

Failures from the boundary are not retried or propagated to the page:
they are logged and surfaced to the user as a destructive toast.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from imaginify.exceptions import InsufficientCreditsError, IntegrationError
from imaginify.integrations.interfaces import Toast, ToastSink
from imaginify.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_ERROR_DESCRIPTION = "Please try again"


@contextmanager
def surface_errors(
    toast_sink: ToastSink,
    title: str = "Something went wrong",
    *,
    description: str | None = None,
) -> Iterator[None]:
    """Turn an IntegrationError raised in the block into a toast.

    Errors that are not IntegrationErrors propagate unchanged.
    """
    try:
        yield
    except IntegrationError as e:
        logger.warning(
            "external_call_failed",
            error_code=e.error_code,
            error=e.message,
            **e.context,
        )
        toast_sink.show(
            Toast(
                title=title,
                description=description or DEFAULT_ERROR_DESCRIPTION,
                variant="destructive",
            )
        )


def success_toast(title: str, description: str = "") -> Toast:
    return Toast(title=title, description=description, variant="success")


def ensure_credits(balance: int, fee: int) -> None:
    """Check that a balance covers a transformation fee.

    Fees may be stored as negative deltas; only their magnitude matters.

    Raises:
        InsufficientCreditsError: If the balance is lower than the fee.
    """
    required = abs(fee)
    if balance < required:
        raise InsufficientCreditsError(required=required, available=balance)
