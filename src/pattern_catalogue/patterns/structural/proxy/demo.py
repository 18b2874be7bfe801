"""Proxy demo - admin, cached admin, regular user and a denied guest."""
import sys

from pattern_catalogue.patterns.structural.proxy.images import ImageProxy


def main() -> int:
    print("=== Proxy Pattern Demo ===\n")
    admin_proxy = ImageProxy("vacation.jpg", "admin")
    user_proxy = ImageProxy("document.pdf", "user")
    guest_proxy = ImageProxy("secret.jpg", "guest")

    print("1. Admin accessing image:")
    admin_proxy.display()
    print()

    print("2. Admin accessing same image again (cached):")
    admin_proxy.display()
    print()

    print("3. Regular user accessing image:")
    user_proxy.display()
    print()

    print("4. Guest trying to access image (access denied):")
    guest_proxy.display()
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
