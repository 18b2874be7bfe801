"""Audio player that plays mp3 itself and adapts advanced players for other formats."""
from abc import ABC, abstractmethod
from typing import Dict, Type

from pattern_catalogue.domain.base.exceptions import UnsupportedFormatError
from pattern_catalogue.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class MediaPlayer(ABC):
    """Target interface."""

    @abstractmethod
    def play(self, audio_type: str, filename: str) -> None:
        pass


class AdvancedMediaPlayer:
    """Adaptee interface: one method per format it understands."""

    def play_vlc(self, filename: str) -> None:
        raise UnsupportedFormatError("vlc")

    def play_mp4(self, filename: str) -> None:
        raise UnsupportedFormatError("mp4")

    def play_wav(self, filename: str) -> None:
        raise UnsupportedFormatError("wav")


class VlcPlayer(AdvancedMediaPlayer):
    def play_vlc(self, filename: str) -> None:
        print(f"Playing VLC file: {filename}")


class Mp4Player(AdvancedMediaPlayer):
    def play_mp4(self, filename: str) -> None:
        print(f"Playing MP4 file: {filename}")


class WavPlayer(AdvancedMediaPlayer):
    def play_wav(self, filename: str) -> None:
        print(f"Playing WAV file: {filename}")


class MediaAdapter(MediaPlayer):
    """Wraps the advanced player that handles audio_type."""

    _players: Dict[str, Type[AdvancedMediaPlayer]] = {
        "vlc": VlcPlayer,
        "mp4": Mp4Player,
        "wav": WavPlayer,
    }

    def __init__(self, audio_type: str):
        player_class = self._players.get(audio_type.lower())
        if player_class is None:
            raise UnsupportedFormatError(audio_type)
        self.audio_type = audio_type.lower()
        self._player = player_class()

    @classmethod
    def supports(cls, audio_type: str) -> bool:
        return audio_type.lower() in cls._players

    def play(self, audio_type: str, filename: str) -> None:
        getattr(self._player, f"play_{audio_type.lower()}")(filename)


class AudioPlayer(MediaPlayer):
    """Plays mp3 natively; everything else goes through a MediaAdapter."""

    def play(self, audio_type: str, filename: str) -> None:
        if audio_type.lower() == "mp3":
            print(f"Playing MP3 file: {filename}")
            return
        try:
            MediaAdapter(audio_type).play(audio_type, filename)
        except UnsupportedFormatError as e:
            logger.debug("Unsupported media format", audio_type=audio_type)
            print(e)
