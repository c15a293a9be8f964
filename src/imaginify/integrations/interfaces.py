"""Boundaries to the services the design system is embedded in.

Pages built on the design system talk to an identity provider, a hosted
image-transformation service, an image store and a toast sink. Only the
interfaces live here; implementations belong to the host application.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

ToastVariant = Literal["default", "success", "destructive"]


@dataclass(frozen=True)
class Toast:
    """A transient notification. Duration is in milliseconds."""

    title: str
    description: str = ""
    duration: int = 5000
    variant: ToastVariant = "default"


@dataclass(frozen=True)
class ImageRecord:
    image_id: str
    author_id: str
    title: str
    transformation_type: str
    public_id: str
    secure_url: str
    width: int | None = None
    height: int | None = None
    config: Mapping[str, Any] = field(default_factory=dict)
    transformation_url: str | None = None


class IdentityProvider(ABC):
    @abstractmethod
    def current_user_id(self) -> str | None:
        pass

    @abstractmethod
    def credit_balance(self, user_id: str) -> int:
        pass

    @abstractmethod
    def update_credits(self, user_id: str, delta: int) -> int:
        pass


class ImageTransformService(ABC):
    @abstractmethod
    def transformation_url(
        self, public_id: str, width: int, height: int, config: Mapping[str, Any]
    ) -> str:
        pass


class ImageRepository(ABC):
    @abstractmethod
    def add(self, record: ImageRecord) -> ImageRecord:
        pass

    @abstractmethod
    def get(self, image_id: str) -> ImageRecord | None:
        pass

    @abstractmethod
    def update(self, record: ImageRecord) -> ImageRecord:
        pass

    @abstractmethod
    def delete(self, image_id: str) -> None:
        pass

    @abstractmethod
    def list_by_author(self, author_id: str) -> Iterable[ImageRecord]:
        pass


class ToastSink(ABC):
    @abstractmethod
    def show(self, toast: Toast) -> None:
        pass
