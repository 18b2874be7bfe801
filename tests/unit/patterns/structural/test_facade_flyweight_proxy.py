"""Tests for the computer facade, particle flyweights and the image proxy."""
from unittest.mock import Mock

import pytest

from pattern_catalogue.domain.base.exceptions import UnknownTypeError
from pattern_catalogue.patterns.structural.facade import ComputerFacade
from pattern_catalogue.patterns.structural.flyweight import GameWorld, ParticleFactory
from pattern_catalogue.patterns.structural.proxy import ImageProxy


class TestComputerFacade:
    """Test the facade sequences its subsystems."""

    def setup_method(self):
        """Set up a facade with mocked subsystems."""
        self.facade = ComputerFacade()
        self.calls = Mock()
        self.facade.cpu = self.calls.cpu
        self.facade.memory = self.calls.memory
        self.facade.hard_drive = self.calls.hard_drive
        self.facade.gpu = self.calls.gpu

    def test_start_order(self):
        """Test start touches cpu, memory, hard drive then gpu."""
        self.facade.start()
        assert [name for name, _, _ in self.calls.mock_calls] == [
            "cpu.start",
            "memory.load",
            "hard_drive.read",
            "gpu.initialize",
        ]

    def test_shutdown_order(self):
        """Test shutdown touches hard drive, memory, gpu then cpu."""
        self.facade.shutdown()
        assert [name for name, _, _ in self.calls.mock_calls] == [
            "hard_drive.write",
            "memory.free",
            "gpu.shutdown",
            "cpu.shutdown",
        ]

    def test_status_reflects_started_state(self, capsys):
        """Test real subsystems report their state after start."""
        facade = ComputerFacade()
        facade.start()
        facade.status()
        out = capsys.readouterr().out
        assert "CPU: Temperature 45°C" in out
        assert "Memory: 4000/16000 MB used" in out
        assert "GPU: Load 25%" in out


class TestFlyweight:
    """Test intrinsic state sharing."""

    def test_requests_share_two_flyweights(self, capsys):
        """Test six particles of two kinds share two intrinsic objects."""
        world = GameWorld()
        for kind in ["bullet", "bullet", "bullet", "missile", "missile", "bullet"]:
            world.add_particle(kind, 0, 0, 1, 1, 1, "red")

        assert world.factory.count() == 2
        assert len(world.particles) == 6
        assert world.particles[0].type is world.particles[5].type
        out = capsys.readouterr().out
        assert out.count("Creating new flyweight") == 2
        assert out.count("Reusing existing flyweight") == 4

    def test_extrinsic_state_is_per_particle(self):
        """Test updating moves each particle by its own velocity."""
        world = GameWorld()
        fast = world.add_particle("bullet", 0, 0, 10, 0, 1, "red")
        slow = world.add_particle("bullet", 0, 0, 1, 2, 1, "red")
        world.update(0.5)
        assert (fast.x, fast.y) == (5, 0)
        assert (slow.x, slow.y) == (0.5, 1)

    def test_unknown_kind(self):
        """Test a kind without a sprite is rejected."""
        with pytest.raises(UnknownTypeError, match="Unknown particle type: laser"):
            ParticleFactory().get("laser")


class TestImageProxy:
    """Test access control, lazy loading and caching."""

    def test_denied_role_never_loads(self, capsys):
        """Test a guest never causes the real image to exist."""
        proxy = ImageProxy("secret.jpg", "guest")
        proxy.display()
        assert proxy.real_image is None
        assert capsys.readouterr().out == "Access denied: Invalid user role 'guest'\n"

    def test_loads_once_then_caches(self, capsys):
        """Test the first display loads and the second serves from cache."""
        proxy = ImageProxy("photo.jpg", "admin")
        proxy.display()
        first = capsys.readouterr().out
        proxy.display()
        second = capsys.readouterr().out

        assert "Proxy: Creating real image object" in first
        assert "Loading image from disk: photo.jpg" in first
        assert "Proxy: Image already cached, serving from cache" in second
        assert "Loading image from disk" not in second
        assert proxy.real_image.is_loaded
