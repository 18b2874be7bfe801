"""Package metadata."""

PACKAGE_NAME = "pattern-catalogue"
PACKAGE_NAME_SHORT = "patterns"
DESCRIPTION = "Runnable catalogue of design pattern demonstrations"

__version__ = "1.0.0"
