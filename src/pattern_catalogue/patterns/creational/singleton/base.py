"""Thread-safe lazily constructed singleton base."""
import threading
from typing import Any, Optional, Type, TypeVar

T = TypeVar("T", bound="ThreadSafeSingleton")


class ThreadSafeSingleton:
    """
    Base class for process-wide instances.

    Every subclass gets its own instance slot and lock. get_instance() uses
    double-checked locking so concurrent first accesses construct exactly once;
    reset_instance() is the teardown hook.
    """

    _instance: Optional[Any] = None
    _lock: threading.RLock = threading.RLock()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._instance = None
        cls._lock = threading.RLock()

    @classmethod
    def get_instance(cls: Type[T], *args, **kwargs) -> T:
        """Get singleton instance, constructing it on first access."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls(*args, **kwargs)
        return cls._instance

    @classmethod
    def has_instance(cls) -> bool:
        return cls._instance is not None

    @classmethod
    def reset_instance(cls) -> None:
        """Release the instance so the next access constructs a fresh one."""
        with cls._lock:
            if cls._instance is not None:
                cls._instance.close()
                cls._instance = None

    def close(self) -> None:
        pass
