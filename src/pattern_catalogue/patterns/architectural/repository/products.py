"""Product entity stored by the repositories."""
from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """Catalogue item; price and stock may never go negative."""

    model_config = ConfigDict(validate_assignment=True)

    id: int
    name: str
    price: float = Field(ge=0)
    stock: int = Field(ge=0)

    def __str__(self) -> str:
        return f"Product{{id={self.id}, name='{self.name}', price={self.price:.2f}, stock={self.stock}}}"
