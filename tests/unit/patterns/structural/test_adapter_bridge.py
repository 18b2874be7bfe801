"""Tests for the adapters and the renderer bridge."""
import pytest

from pattern_catalogue.domain.base.exceptions import UnsupportedFormatError
from pattern_catalogue.patterns.structural.adapter import (
    AudioPlayer,
    LegacyPaymentAdapter,
    MediaAdapter,
    RectangleAdapter,
)
from pattern_catalogue.patterns.structural.bridge import (
    Circle,
    DirectXRenderer,
    Line,
    OpenGLRenderer,
    Rectangle,
)


class TestMediaAdapter:
    """Test the audio player and its adapter."""

    def setup_method(self):
        """Set up a player."""
        self.player = AudioPlayer()

    def test_mp3_is_native(self, capsys):
        """Test mp3 files are played without an adapter."""
        self.player.play("mp3", "song.mp3")
        assert capsys.readouterr().out == "Playing MP3 file: song.mp3\n"

    @pytest.mark.parametrize(
        "audio_type,expected",
        [
            ("vlc", "Playing VLC file: movie.vlc"),
            ("mp4", "Playing MP4 file: movie.vlc"),
            ("WAV", "Playing WAV file: movie.vlc"),
        ],
    )
    def test_adapted_formats(self, capsys, audio_type, expected):
        """Test advanced formats are routed through the adapter."""
        self.player.play(audio_type, "movie.vlc")
        assert capsys.readouterr().out.strip() == expected

    def test_unsupported_format_reported(self, capsys):
        """Test an unsupported format prints the diagnostic instead of raising."""
        self.player.play("avi", "clip.avi")
        assert capsys.readouterr().out == "Invalid media. avi format not supported\n"

    def test_adapter_rejects_unknown_format(self):
        """Test constructing an adapter for an unknown format fails."""
        assert not MediaAdapter.supports("avi")
        with pytest.raises(UnsupportedFormatError):
            MediaAdapter("avi")


class TestLegacyPaymentAdapter:
    """Test currency conversion onto the legacy system."""

    def setup_method(self):
        """Set up an adapter."""
        self.adapter = LegacyPaymentAdapter()

    def test_converts_to_usd(self, capsys):
        """Test non-USD amounts are converted before payment."""
        assert self.adapter.process_payment("EUR", 100, "Credit Card")

        out = capsys.readouterr().out
        assert "  Converted: $110.00 USD" in out
        assert "Legacy payment: $110.00 processed" in out
        assert self.adapter.transaction_id() == "TXN_1_EUR"

    def test_transaction_ids_increase(self):
        """Test each payment gets the next transaction number."""
        self.adapter.process_payment("USD", 10, "Cash")
        self.adapter.process_payment("GBP", 10, "Cash")
        assert self.adapter.transaction_id() == "TXN_2_GBP"

    def test_unsupported_currency(self, capsys):
        """Test an unknown currency is refused without paying."""
        assert not self.adapter.process_payment("XYZ", 10, "Cash")
        assert capsys.readouterr().out == "Unsupported currency: XYZ\n"
        assert self.adapter.transaction_id() == ""


class TestRectangleAdapter:
    """Test the class adapter over the corner-based API."""

    def test_draw_converts_to_corners(self, capsys):
        """Test origin and size become two corners."""
        RectangleAdapter().draw(10, 20, 30, 40)
        assert capsys.readouterr().out == "Legacy Rectangle drawn from (10,20) to (40,60)\n"


class TestBridge:
    """Test shapes are independent of their renderer."""

    def test_circle_with_each_renderer(self, capsys):
        """Test one circle drawn through both backends."""
        circle = Circle(OpenGLRenderer(), 5, 10, 15)
        circle.draw()
        circle.set_renderer(DirectXRenderer())
        circle.draw()

        out = capsys.readouterr().out
        assert "[OpenGL] Drawing circle at (5.0, 10.0) with radius 15.0" in out
        assert "  OpenGL: glBegin(GL_TRIANGLE_FAN); /* circle implementation */" in out
        assert "[DirectX] Drawing circle at (5.0, 10.0) with radius 15.0" in out
        assert "  DirectX: DrawIndexedPrimitive(); /* circle implementation */" in out

    def test_rectangle_move_and_resize(self, capsys):
        """Test geometry changes stay on the abstraction side."""
        rectangle = Rectangle(DirectXRenderer(), 0, 0, 10, 4)
        rectangle.move(2, 3)
        rectangle.resize(1.5)

        assert (rectangle.x, rectangle.y, rectangle.width, rectangle.height) == (2, 3, 15, 6)
        assert "new size: 15.0x6.0" in capsys.readouterr().out

    def test_line_resize_scales_about_first_endpoint(self):
        """Test a line keeps its start point when resized."""
        line = Line(OpenGLRenderer(), 1, 1, 3, 5)
        line.resize(2)
        assert (line.x1, line.y1, line.x2, line.y2) == (1, 1, 5, 9)
