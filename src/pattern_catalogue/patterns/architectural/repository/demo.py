"""Repository demo - one service over in-memory and JSON file storage."""
import sys
import tempfile
from pathlib import Path

from pattern_catalogue.domain.base.exceptions import ResourceNotFoundError
from pattern_catalogue.patterns.architectural.repository.repositories import (
    FileProductRepository,
    InMemoryProductRepository,
)
from pattern_catalogue.patterns.architectural.repository.service import ProductService


def run_in_memory() -> None:
    print("1. In-Memory Repository Demo:")
    service = ProductService(InMemoryProductRepository())
    service.add_product(1, "Laptop", 999.99, 10)
    service.add_product(2, "Mouse", 25.50, 50)
    service.add_product(3, "Keyboard", 75.00, 25)
    service.add_product(4, "Monitor", 299.99, 15)
    service.add_product(5, "Broken Cable", -3.00, 1)

    print("\nProducts added. Current inventory:")
    service.print_all_products()

    print("\nFinding product with ID 2:")
    print(f"Found: {service.require_product(2)}")

    print("\nSearching for products containing 'Key':")
    for product in service.search_by_name("Key"):
        print(f"Found: {product}")

    print("\nProducts between $20 and $100:")
    for product in service.products_in_price_range(20.0, 100.0):
        print(product)

    print("\nUpdating product ID 1:")
    if service.update_product(1, "Gaming Laptop", 1299.99, 8):
        print("Product updated successfully")
        print(f"Updated: {service.require_product(1)}")

    print("\nDeleting product ID 2:")
    if service.remove_product(2):
        print("Product deleted successfully")
        print("Remaining products:")
        service.print_all_products()

    print("\nLooking up deleted product ID 2:")
    try:
        service.require_product(2)
    except ResourceNotFoundError as e:
        print(f"Lookup failed: {e}")


def run_file_backed(file_path: Path) -> None:
    print("\n2. File Repository Demo:")
    service = ProductService(FileProductRepository(str(file_path)))
    service.add_product(100, "File Product 1", 49.99, 20)
    service.add_product(101, "File Product 2", 89.99, 15)

    print("\nProducts saved to file:")
    service.print_all_products()

    print("\nLoading from file (new repository instance):")
    ProductService(FileProductRepository(str(file_path))).print_all_products()


def main() -> int:
    print("=== Repository Pattern Demo ===\n")
    run_in_memory()
    with tempfile.TemporaryDirectory() as directory:
        run_file_backed(Path(directory) / "products.json")
    return 0


if __name__ == "__main__":
    sys.exit(main())
