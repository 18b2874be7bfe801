"""Adapter demo - media formats, a legacy payment gateway and a legacy rectangle."""
import sys

from pattern_catalogue.patterns.structural.adapter.media import AudioPlayer
from pattern_catalogue.patterns.structural.adapter.payment import LegacyPaymentAdapter
from pattern_catalogue.patterns.structural.adapter.rectangle import RectangleAdapter


def main() -> int:
    print("--- Audio Player with Adapter Pattern ---")
    player = AudioPlayer()
    player.play("mp3", "song.mp3")
    player.play("mp4", "video.mp4")
    player.play("vlc", "movie.vlc")
    player.play("wav", "sound.wav")
    player.play("avi", "unsupported.avi")

    print("\n--- Payment System Adapter ---")
    processor = LegacyPaymentAdapter()
    for currency, amount, method in [
        ("USD", 100.50, "Credit Card"),
        ("EUR", 85.75, "PayPal"),
        ("GBP", 75.25, "Bank Transfer"),
    ]:
        print("\nProcessing payment...")
        if processor.process_payment(currency, amount, method):
            print(f"Payment successful! Transaction ID: {processor.transaction_id()}")
        else:
            print("Payment failed!")

    print("\n--- Rectangle Class Adapter ---")
    RectangleAdapter().draw(10, 20, 100, 50)
    return 0


if __name__ == "__main__":
    sys.exit(main())
