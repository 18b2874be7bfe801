"""Tests for the thread-safe singleton services."""
from concurrent.futures import ThreadPoolExecutor

from pattern_catalogue.patterns.creational.singleton import (
    DatabaseConnection,
    FileLogger,
    Logger,
    ThreadSafeSingleton,
)
from pattern_catalogue.patterns.creational.singleton import demo


class TestThreadSafeSingleton:
    """Test lazy construction and teardown."""

    def test_same_instance(self):
        """Test repeated access returns one instance."""
        assert DatabaseConnection.get_instance() is DatabaseConnection.get_instance()

    def test_construction_is_lazy(self):
        """Test nothing is constructed before first access."""
        assert not DatabaseConnection.has_instance()
        DatabaseConnection.get_instance()
        assert DatabaseConnection.has_instance()

    def test_subclasses_have_separate_slots(self):
        """Test each subclass keeps its own instance."""
        assert DatabaseConnection.get_instance() is not Logger.get_instance()

    def test_concurrent_first_access_constructs_once(self, capsys):
        """Test racing threads construct a single connection."""
        with ThreadPoolExecutor(max_workers=8) as executor:
            instances = list(executor.map(lambda _: DatabaseConnection.get_instance(), range(32)))

        assert all(instance is instances[0] for instance in instances)
        assert capsys.readouterr().out.count("Database connection established") == 1

    def test_reset_releases_instance(self):
        """Test reset forces a fresh instance on next access."""
        first = Logger.get_instance()
        Logger.reset_instance()
        assert not Logger.has_instance()
        assert Logger.get_instance() is not first

    def test_reset_without_instance_is_noop(self):
        """Test resetting an unconstructed singleton does nothing."""

        class Unused(ThreadSafeSingleton):
            pass

        Unused.reset_instance()
        assert not Unused.has_instance()


class TestDatabaseConnection:
    """Test the shared connection string."""

    def test_default_connection_string(self):
        """Test the connection starts on localhost."""
        assert DatabaseConnection.get_instance().get_connection_string() == "database://localhost:5432"

    def test_change_is_visible_through_every_handle(self, capsys):
        """Test a change through one handle is seen through another."""
        DatabaseConnection.get_instance().set_connection_string("database://remote:5432")
        DatabaseConnection.get_instance().execute_query("SELECT 1")
        assert "Executing query: SELECT 1 on database://remote:5432" in capsys.readouterr().out


class TestFileLogger:
    """Test the file-backed logger."""

    def test_appends_lines(self, tmp_path):
        """Test messages are appended with a [LOG] prefix."""
        path = tmp_path / "app.log"
        logger = FileLogger.get_instance(str(path))
        logger.log("Application started")
        FileLogger.get_instance().log("Application finished")
        FileLogger.reset_instance()

        assert path.read_text() == "[LOG] Application started\n[LOG] Application finished\n"

    def test_unopenable_file(self, tmp_path, capsys):
        """Test an unopenable file reports to stderr and later logging is a no-op."""
        logger = FileLogger.get_instance(str(tmp_path / "missing" / "app.log"))

        assert not logger.is_open
        assert "Failed to open log file" in capsys.readouterr().err
        logger.log("dropped")

    def test_reset_closes_file(self, tmp_path):
        """Test teardown closes the underlying file."""
        logger = FileLogger.get_instance(str(tmp_path / "app.log"))
        assert logger.is_open
        FileLogger.reset_instance()
        assert not logger.is_open


class TestSingletonDemo:
    """Test the demo's concurrent first access."""

    def test_workers_race_on_a_released_connection(self, capsys, demo_config):
        """Test the workers construct one fresh connection and share it."""
        assert demo.main(demo_config.model_copy(update={"singleton_workers": 4})) == 0

        out = capsys.readouterr().out
        before, after = out.split("Testing thread safety:")
        assert before.count("Database connection established") == 1
        assert after.count("Database connection established") == 1
        assert "All threads saw the same instance? Yes" in after
        assert after.count("on database://localhost:5432") == 4
