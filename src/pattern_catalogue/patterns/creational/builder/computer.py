"""Computer product, its fluent builder and the director holding standard recipes."""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

from pattern_catalogue.domain.base.exceptions import AlreadyBuiltError
from pattern_catalogue.infrastructure.logging.logger import get_logger

NOT_SPECIFIED = "Not specified"


class Computer(BaseModel):
    """Finished computer configuration. Every part is optional."""
    model_config = ConfigDict(frozen=True)

    cpu: Optional[str] = None
    ram: Optional[str] = None
    storage: Optional[str] = None
    gpu: Optional[str] = None
    motherboard: Optional[str] = None
    has_wifi: bool = False
    has_bluetooth: bool = False

    def display(self) -> None:
        print("Computer Configuration:")
        print(f"  CPU: {self.cpu or NOT_SPECIFIED}")
        print(f"  RAM: {self.ram or NOT_SPECIFIED}")
        print(f"  Storage: {self.storage or NOT_SPECIFIED}")
        print(f"  GPU: {self.gpu or NOT_SPECIFIED}")
        print(f"  Motherboard: {self.motherboard or NOT_SPECIFIED}")
        print(f"  WiFi: {'Yes' if self.has_wifi else 'No'}")
        print(f"  Bluetooth: {'Yes' if self.has_bluetooth else 'No'}")


class ComputerBuilder:
    """
    Accumulates parts and hands over a Computer on build().

    Each setter returns the builder so calls chain. Once build() has been called
    the builder owns nothing and every further call raises AlreadyBuiltError.
    """

    def __init__(self):
        self._parts: Dict[str, Any] = {}
        self._built = False
        self._logger = get_logger(__name__)

    def _set(self, part: str, value: Any) -> "ComputerBuilder":
        if self._built:
            raise AlreadyBuiltError(type(self).__name__)
        self._parts[part] = value
        return self

    def set_cpu(self, cpu: str) -> "ComputerBuilder":
        return self._set("cpu", cpu)

    def set_ram(self, ram: str) -> "ComputerBuilder":
        return self._set("ram", ram)

    def set_storage(self, storage: str) -> "ComputerBuilder":
        return self._set("storage", storage)

    def set_gpu(self, gpu: str) -> "ComputerBuilder":
        return self._set("gpu", gpu)

    def set_motherboard(self, motherboard: str) -> "ComputerBuilder":
        return self._set("motherboard", motherboard)

    def add_wifi(self) -> "ComputerBuilder":
        return self._set("has_wifi", True)

    def add_bluetooth(self) -> "ComputerBuilder":
        return self._set("has_bluetooth", True)

    @property
    def is_built(self) -> bool:
        return self._built

    def build(self) -> Computer:
        """Hand over the finished computer; the builder is spent afterwards."""
        if self._built:
            raise AlreadyBuiltError(type(self).__name__)
        computer = Computer(**self._parts)
        self._parts = {}
        self._built = True
        self._logger.debug("Computer built", parts=sorted(computer.model_dump(exclude_none=True)))
        return computer


class ComputerDirector:
    """Standard build recipes."""

    @staticmethod
    def build_gaming(builder: ComputerBuilder) -> Computer:
        return (
            builder.set_cpu("Intel i9-13900K")
            .set_ram("32GB DDR5")
            .set_storage("1TB NVMe SSD")
            .set_gpu("RTX 4080")
            .set_motherboard("ASUS ROG Strix Z790")
            .add_wifi()
            .add_bluetooth()
            .build()
        )

    @staticmethod
    def build_office(builder: ComputerBuilder) -> Computer:
        return (
            builder.set_cpu("Intel i5-13400")
            .set_ram("16GB DDR4")
            .set_storage("512GB SSD")
            .set_motherboard("MSI Pro B660M")
            .add_wifi()
            .build()
        )

    @staticmethod
    def build_budget(builder: ComputerBuilder) -> Computer:
        return (
            builder.set_cpu("AMD Ryzen 5 5600G")
            .set_ram("8GB DDR4")
            .set_storage("256GB SSD")
            .build()
        )
