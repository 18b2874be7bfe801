"""Run every demonstration driver and check its transcript."""
import pytest

from pattern_catalogue.cli.catalogue import DEMOS, load_main

# Lines each transcript must contain, in this order
KEY_LINES = {
    "factory": ["Area: 78.54", "Area: 24.00", "Area: 6.00"],
    "abstract_factory": ["=== Abstract Factory Pattern Demo ==="],
    "builder": ["Building Gaming Computer:", "  GPU: RTX 4080"],
    "prototype": [
        "Drawing Rectangle at (10,20) with size 100x50, color: Red",
        "Lookup failed: Prototype not found: YellowTriangle",
        "Drawing Rectangle at (0,0) with size 100x50, color: Red",
    ],
    "singleton": [
        "Are both instances the same? Yes",
        "Testing thread safety:",
        "All threads saw the same instance? Yes",
        "Are both logger instances the same? Yes",
    ],
    "adapter": ["Playing MP3 file: song.mp3", "Invalid media. avi format not supported"],
    "bridge": ["[OpenGL] Drawing circle at", "[DirectX] Drawing circle at"],
    "composite": ["Building file system structure:", "File system structure:"],
    "decorator": ["Simple Coffee: $2.00", "Simple Coffee, Milk, Sugar, Whip: $3.40"],
    "facade": ["=== Starting Computer ===", "=== Shutting Down Computer ==="],
    "flyweight": ["Total flyweight objects created: 2", "Total particle instances: 6"],
    "proxy": ["Proxy: Image already cached, serving from cache", "Access denied: Invalid user role 'guest'"],
    "chain_of_responsibility": [
        "Cannot pay using Bank. Proceeding...",
        "Cannot pay using PayPal. Proceeding...",
        "Paid 250 using Bitcoin",
    ],
    "command": [
        "Light in Living Room is ON",
        "Light in Kitchen is ON",
        "Light in Living Room is OFF",
        "Light in Living Room is ON",
    ],
    "interpreter": [
        "Parsed as: ((x * y) - z)",
        "Result: 47",
        "Result: 201",
        "Output: 106",
        "Error in 'x + q': Variable 'q' not found",
        "Error in 'x / (y - 5)': Division by zero",
    ],
    "iterator": ["MyList() : mSize(100)", "traversing ... "],
    "mediator": ["1 Sent message hello", "Processing login for user: "],
    "memento": ["Caretaker: No saved state to restore", "State restored!"],
    "mvc": ["=== MVC Pattern Demo ===", "User with ID 999 not found"],
    "null_object": ["Welcome, guest!", "Please register to purchase: "],
    "observer": [
        "Alert AlertSystem: WARNING! High temperature: 35°C",
        "Observer Display1 detached",
        "Alert AlertSystem: WARNING! Freezing temperature: -5°C",
        "Observer AlertSystem rejected: Cannot exceed observer limit: 1",
    ],
    "state": [
        "=== Scenario 1: Successful Purchase ===",
        "=== Scenario 4: Restock ===",
        "Traffic light changed to: GREEN (15s)",
        "Traffic light changed to: YELLOW (3s)",
        "Final light: YELLOW (0s remaining)",
    ],
    "strategy": ["Card: ****-****-****-3456", "No payment method selected!"],
    "visitor": ["--- Classic visitor ---", "=== Visitor Pattern Demo - Graphics Processing ==="],
    "template_method": [
        "Formatted: \"VALUE1,VALUE2,VALUE3\"",
        "JSON validation error - sending alert to admin",
        "Boss defeated! You are victorious!",
        "You have been defeated by the boss!",
        "Grilled Ribeye Steak is ready to serve!",
    ],
    "dependency_injection": [
        "Created user with ID: ID1",
        "Incomplete builder rejected: All dependencies must be provided; missing: database, email_service",
        "Singleton database shared? Yes",
        "Resolution failed: No registration for abstract type Logger",
        "Resolution failed: Circular dependency detected: ReportService -> AuditService -> ReportService",
        "Connected to PostgreSQL: postgresql://prod:5432/app",
    ],
    "event_sourcing": [
        "[failed] Failed to reopen Bob's account: Account ACC-2 already exists",
        "Alice's account: $1750.00 (Open)",
        "[failed] Large withdrawal failed: Insufficient funds: balance $400.00, requested $1000.00",
        "[failed] Deposit to closed account failed: Cannot deposit while account is closed",
        "[failed] Deposit to unknown account failed: Account with ID ACC-9 not found",
        "Total events stored: 6",
    ],
    "repository": [
        "Error adding product: Invalid product data for ID 5",
        "All Products (4):",
        "Updated: Product{id=1, name='Gaming Laptop', price=1299.99, stock=8}",
        "Lookup failed: Product with ID 2 not found",
        "Loading from file (new repository instance):",
        "All Products (2):",
    ],
}


def test_every_demo_has_key_lines():
    """Test the key line table covers the whole catalogue."""
    assert set(KEY_LINES) == {entry.name for entry in DEMOS}


@pytest.mark.usefixtures("clean_env")
@pytest.mark.parametrize("entry", DEMOS, ids=lambda entry: entry.name)
def test_demo_runs_cleanly(entry, capsys, monkeypatch, tmp_path):
    """Test each driver exits 0 and prints its key lines in order."""
    monkeypatch.chdir(tmp_path)
    assert load_main(entry)() == 0

    out = capsys.readouterr().out
    position = 0
    for line in KEY_LINES[entry.name]:
        found = out.find(line, position)
        assert found >= 0, f"{line!r} missing from {entry.name} transcript"
        position = found + len(line)


@pytest.mark.usefixtures("clean_env")
def test_transcripts_are_deterministic(capsys, monkeypatch, tmp_path):
    """Test running a driver twice gives the same transcript."""
    monkeypatch.chdir(tmp_path)
    for entry in DEMOS:
        if entry.name == "singleton":
            continue
        demo_main = load_main(entry)
        demo_main()
        first = capsys.readouterr().out
        demo_main()
        assert capsys.readouterr().out == first, entry.name


def test_configured_demos(capsys, demo_config):
    """Test configurable drivers honour demo settings."""
    demos = {entry.name: load_main(entry) for entry in DEMOS if entry.configurable}

    assert demos["iterator"](demo_config.model_copy(update={"list_size": 3})) == 0
    assert "MyList() : mSize(3)" in capsys.readouterr().out

    assert demos["singleton"](demo_config.model_copy(update={"singleton_workers": 2})) == 0
    out = capsys.readouterr().out
    assert "Worker thread 2 completed" in out
    assert "Worker thread 3 completed" not in out
    assert f"File log written to {demo_config.singleton_log_file}" in out
