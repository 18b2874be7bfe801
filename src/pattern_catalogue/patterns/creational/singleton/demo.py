"""Singleton demo - shared connection, concurrent first access, loggers."""
import sys
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from pattern_catalogue.config import DemoConfig, load_config
from pattern_catalogue.patterns.creational.singleton.services import (
    DatabaseConnection,
    FileLogger,
    Logger,
)


def worker_thread(worker_id: int) -> DatabaseConnection:
    db = DatabaseConnection.get_instance()
    db.execute_query(f"SELECT * FROM users WHERE id = {worker_id}")
    Logger.get_instance().log(f"Worker thread {worker_id} completed")
    return db


def main(config: Optional[DemoConfig] = None) -> int:
    config = config or load_config().demos
    print("=== Singleton Pattern Demo ===")

    db1 = DatabaseConnection.get_instance()
    db2 = DatabaseConnection.get_instance()
    print(f"Are both instances the same? {'Yes' if db1 is db2 else 'No'}")
    db1.execute_query("SELECT * FROM products")
    db2.set_connection_string("database://remote:5432")
    db1.execute_query("SELECT * FROM orders")

    # Release the connection so the workers race on first access
    DatabaseConnection.reset_instance()
    print("\nTesting thread safety:")
    with ThreadPoolExecutor(max_workers=config.singleton_workers) as executor:
        instances = list(executor.map(worker_thread, range(1, config.singleton_workers + 1)))
    shared = all(instance is instances[0] for instance in instances)
    print(f"All threads saw the same instance? {'Yes' if shared else 'No'}")

    print("\nTesting Logger singleton:")
    logger1 = Logger.get_instance()
    logger2 = Logger.get_instance()
    print(f"Are both logger instances the same? {'Yes' if logger1 is logger2 else 'No'}")
    logger1.log("Application started")
    logger2.log("Application running")

    print("\nTesting file logger singleton:")
    file_logger = FileLogger.get_instance(config.singleton_log_file)
    file_logger.log("Application started")
    file_logger.log("Performing some operations")
    FileLogger.get_instance().log("Application finished")
    status = "written to" if file_logger.is_open else "unavailable:"
    print(f"File log {status} {file_logger.path}")

    # Teardown in reverse order of construction
    FileLogger.reset_instance()
    Logger.reset_instance()
    DatabaseConnection.reset_instance()
    return 0


if __name__ == "__main__":
    sys.exit(main())
