"""Adapter pattern - presenting incompatible players and legacy systems behind one interface."""
from .media import AdvancedMediaPlayer, AudioPlayer, MediaAdapter, MediaPlayer
from .payment import LegacyPaymentAdapter, LegacyPaymentSystem, PaymentProcessor
from .rectangle import LegacyRectangle, RectangleAdapter

__all__ = [
    "AdvancedMediaPlayer",
    "AudioPlayer",
    "LegacyPaymentAdapter",
    "LegacyPaymentSystem",
    "LegacyRectangle",
    "MediaAdapter",
    "MediaPlayer",
    "PaymentProcessor",
    "RectangleAdapter",
]
