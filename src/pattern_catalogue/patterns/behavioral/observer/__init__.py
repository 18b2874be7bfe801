"""Observer pattern - a subject pushes state changes to attached observers."""
from .weather import AlertObserver, DisplayObserver, Observer, Subject

__all__ = ["AlertObserver", "DisplayObserver", "Observer", "Subject"]
