"""Real image subject and the protective, lazy, caching proxy in front of it."""
from abc import ABC, abstractmethod
from typing import FrozenSet, Optional

from pattern_catalogue.infrastructure.logging.logger import get_logger

ALLOWED_ROLES: FrozenSet[str] = frozenset({"admin", "user"})

logger = get_logger(__name__)


class Image(ABC):
    @abstractmethod
    def display(self) -> None:
        pass


class RealImage(Image):
    """Expensive subject: the first display loads the file, later ones reuse it."""

    def __init__(self, filename: str):
        self.filename = filename
        self.is_loaded = False

    def display(self) -> None:
        if not self.is_loaded:
            print(f"Loading image from disk: {self.filename}")
            self.is_loaded = True
        print(f"Displaying image: {self.filename}")


class ImageProxy(Image):
    """
    Stands in for a RealImage.

    Denied roles never cause the real image to be created; permitted calls are
    logged, create the real image on first use and report cache hits.
    """

    def __init__(self, filename: str, user_role: str):
        self.filename = filename
        self.user_role = user_role
        self.real_image: Optional[RealImage] = None

    def display(self) -> None:
        if self.user_role not in ALLOWED_ROLES:
            print(f"Access denied: Invalid user role '{self.user_role}'")
            logger.info("Image access denied", role=self.user_role, filename=self.filename)
            return

        print(f"Proxy: Logging access attempt by {self.user_role} for {self.filename}")

        if self.real_image is None:
            print("Proxy: Creating real image object")
            self.real_image = RealImage(self.filename)

        if self.real_image.is_loaded:
            print("Proxy: Image already cached, serving from cache")

        self.real_image.display()
