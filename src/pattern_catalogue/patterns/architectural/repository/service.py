"""Product service working against any repository implementation."""
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError

from pattern_catalogue.domain.base.exceptions import InvalidParameterError, ResourceNotFoundError
from pattern_catalogue.infrastructure.logging.logger import get_logger
from pattern_catalogue.patterns.architectural.repository.products import Product
from pattern_catalogue.patterns.architectural.repository.repositories import ProductRepository


class ProductService:
    """Business operations over products; storage is the repository's concern."""

    def __init__(self, repository: ProductRepository):
        self.repository = repository
        self._logger = get_logger(__name__)

    @staticmethod
    def _build(product_id: int, name: str, price: float, stock: int) -> Product:
        try:
            return Product(id=product_id, name=name, price=price, stock=stock)
        except PydanticValidationError as e:
            raise InvalidParameterError(f"Invalid product data for ID {product_id}", e.errors()) from e

    def add_product(self, product_id: int, name: str, price: float, stock: int) -> bool:
        """Store a new product; invalid data is reported and refused."""
        try:
            product = self._build(product_id, name, price, stock)
        except InvalidParameterError as e:
            print(f"Error adding product: {e}")
            return False
        self.repository.save(product)
        self._logger.info("Product added", product_id=product_id)
        return True

    def update_product(self, product_id: int, name: str, price: float, stock: int) -> bool:
        try:
            product = self._build(product_id, name, price, stock)
        except InvalidParameterError as e:
            print(f"Error updating product: {e}")
            return False
        return self.repository.update(product)

    def get_product(self, product_id: int) -> Optional[Product]:
        return self.repository.find_by_id(product_id)

    def require_product(self, product_id: int) -> Product:
        """
        Fetch a product that must exist.

        Raises:
            ResourceNotFoundError: If no product has that id
        """
        product = self.repository.find_by_id(product_id)
        if product is None:
            raise ResourceNotFoundError("Product", product_id)
        return product

    def remove_product(self, product_id: int) -> bool:
        return self.repository.delete(product_id)

    def all_products(self) -> List[Product]:
        return self.repository.find_all()

    def search_by_name(self, fragment: str) -> List[Product]:
        return self.repository.find_by_name(fragment)

    def products_in_price_range(self, min_price: float, max_price: float) -> List[Product]:
        return self.repository.find_by_price_range(min_price, max_price)

    def available_products(self, min_stock: int = 1) -> List[Product]:
        return self.repository.find_by_stock(min_stock)

    def product_count(self) -> int:
        return self.repository.count()

    def print_all_products(self) -> None:
        products = self.all_products()
        if not products:
            print("No products found.")
            return
        print(f"All Products ({len(products)}):")
        print(f"{'ID':<5}{'Name':<20}{'Price':>10}{'Stock':>7}")
        print("-" * 42)
        for product in products:
            print(f"{product.id:<5}{product.name:<20}{'$' + format(product.price, '.2f'):>10}{product.stock:>7}")
