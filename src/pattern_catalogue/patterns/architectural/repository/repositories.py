"""Product repository interface with in-memory and JSON file implementations."""
import json
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

from pattern_catalogue.infrastructure.logging.logger import get_logger
from pattern_catalogue.patterns.architectural.repository.products import Product


class ProductRepository(ABC):
    """
    Collection-like access to stored products.

    Listings are always ordered by product id.
    """

    @abstractmethod
    def save(self, product: Product) -> None:
        """Insert or replace a product."""

    @abstractmethod
    def find_by_id(self, product_id: int) -> Optional[Product]:
        pass

    @abstractmethod
    def find_all(self) -> List[Product]:
        pass

    @abstractmethod
    def update(self, product: Product) -> bool:
        """Replace an existing product; returns False when the id is not stored."""

    @abstractmethod
    def delete(self, product_id: int) -> bool:
        pass

    def count(self) -> int:
        return len(self.find_all())

    def exists(self, product_id: int) -> bool:
        return self.find_by_id(product_id) is not None

    def find_by_name(self, fragment: str) -> List[Product]:
        return [product for product in self.find_all() if fragment in product.name]

    def find_by_price_range(self, min_price: float, max_price: float) -> List[Product]:
        return [product for product in self.find_all() if min_price <= product.price <= max_price]

    def find_by_stock(self, min_stock: int) -> List[Product]:
        return [product for product in self.find_all() if product.stock >= min_stock]


class InMemoryProductRepository(ProductRepository):
    def __init__(self):
        self._products: Dict[int, Product] = {}

    def save(self, product: Product) -> None:
        self._products[product.id] = product.model_copy()

    def find_by_id(self, product_id: int) -> Optional[Product]:
        product = self._products.get(product_id)
        return product.model_copy() if product else None

    def find_all(self) -> List[Product]:
        return [self._products[key].model_copy() for key in sorted(self._products)]

    def update(self, product: Product) -> bool:
        if product.id not in self._products:
            return False
        self._products[product.id] = product.model_copy()
        return True

    def delete(self, product_id: int) -> bool:
        return self._products.pop(product_id, None) is not None

    def count(self) -> int:
        return len(self._products)


class FileProductRepository(ProductRepository):
    """
    Products persisted as a JSON document keyed by id.

    Reads are served from a cache loaded on first access; every change
    rewrites the whole file atomically through a temporary sibling file.
    """

    def __init__(self, file_path: str):
        self.file_path = Path(file_path)
        self._logger = get_logger(__name__)
        self._cache: Optional[Dict[int, Product]] = None

    def _load(self) -> Dict[int, Product]:
        if self._cache is None:
            self._cache = {}
            if self.file_path.exists():
                with open(self.file_path, "r", encoding="utf-8") as f:
                    content = f.read()
                for key, data in (json.loads(content) if content.strip() else {}).items():
                    self._cache[int(key)] = Product.model_validate(data)
            self._logger.debug(f"Loaded {len(self._cache)} products from {self.file_path}")
        return self._cache

    def _write(self) -> None:
        content = json.dumps(
            {str(key): product.model_dump() for key, product in sorted(self._load().items())}, indent=2
        )
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=self.file_path.parent,
            delete=False,
            prefix=f".{self.file_path.name}.tmp",
        ) as temp_file:
            temp_path = Path(temp_file.name)
            temp_file.write(content)
            temp_file.flush()
            os.fsync(temp_file.fileno())
        try:
            temp_path.replace(self.file_path)
        except OSError:
            temp_path.unlink(missing_ok=True)
            raise
        self._logger.debug(f"Wrote {len(self._cache)} products to {self.file_path}")

    def invalidate(self) -> None:
        """Drop the cache so the next read goes back to the file."""
        self._cache = None

    def save(self, product: Product) -> None:
        self._load()[product.id] = product.model_copy()
        self._write()

    def find_by_id(self, product_id: int) -> Optional[Product]:
        product = self._load().get(product_id)
        return product.model_copy() if product else None

    def find_all(self) -> List[Product]:
        products = self._load()
        return [products[key].model_copy() for key in sorted(products)]

    def update(self, product: Product) -> bool:
        products = self._load()
        if product.id not in products:
            return False
        products[product.id] = product.model_copy()
        self._write()
        return True

    def delete(self, product_id: int) -> bool:
        if self._load().pop(product_id, None) is None:
            return False
        self._write()
        return True
