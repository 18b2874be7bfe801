"""
Dependency injection container.

Services are registered against a type (usually an abstract interface) as a
shared instance, a lazily built singleton, or a factory called on every
request. Anything else is built by auto-wiring: the constructor's annotated
parameters are resolved recursively from the container.
"""
import inspect
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar, cast

from pattern_catalogue.domain.base.exceptions import CircularDependencyError, DependencyResolutionError
from pattern_catalogue.infrastructure.logging.logger import get_logger

T = TypeVar("T")
logger = get_logger(__name__)


def _name(cls: Any) -> str:
    return cls.__name__ if hasattr(cls, "__name__") else str(cls)


class Container:
    def __init__(self):
        self._instances: Dict[Type, Any] = {}
        self._singletons: Dict[Type, Any] = {}
        self._factories: Dict[Type, Callable[["Container"], Any]] = {}

    def register_instance(self, cls: Type[T], instance: T) -> None:
        """Register an already built object for a type."""
        self._instances[cls] = instance
        logger.debug(f"Registered instance for {_name(cls)}")

    def register_singleton(self, cls: Type[T], implementation: Optional[Type] = None) -> None:
        """
        Register a type built once, on first request.

        Args:
            cls: Type callers ask for
            implementation: Concrete class to auto-wire; defaults to ``cls``
        """
        self._singletons[cls] = implementation or cls
        logger.debug(f"Registered singleton type {_name(cls)}")

    def register_factory(self, cls: Type[T], factory: Callable[["Container"], T]) -> None:
        """Register a factory called with the container on every request."""
        self._factories[cls] = factory
        logger.debug(f"Registered factory for {_name(cls)}")

    def has(self, cls: Type) -> bool:
        return cls in self._instances or cls in self._singletons or cls in self._factories

    def registrations(self) -> List[str]:
        """Registered type names with their lifetime, in registration order per lifetime."""
        names = [f"{_name(cls)} (instance)" for cls in self._instances]
        names += [f"{_name(cls)} (singleton)" for cls in self._singletons]
        names += [f"{_name(cls)} (factory)" for cls in self._factories]
        return names

    def get(self, cls: Type[T], dependency_chain: Optional[List[Type]] = None) -> T:
        """
        Resolve an instance of ``cls``.

        Raises:
            CircularDependencyError: If ``cls`` is already being built further up the chain
            DependencyResolutionError: If ``cls`` is abstract and unregistered, a factory
                fails, or a constructor parameter cannot be resolved
        """
        chain = list(dependency_chain or [])
        if cls in chain:
            raise CircularDependencyError(chain + [cls])
        chain.append(cls)
        logger.debug(f"Resolving dependency: {_name(cls)}")

        if cls in self._instances:
            return cast(T, self._instances[cls])

        if cls in self._singletons:
            registered = self._singletons[cls]
            if isinstance(registered, type):
                registered = self._create_instance(registered, chain)
                self._singletons[cls] = registered
                logger.debug(f"Singleton instance created for {_name(cls)}")
            return cast(T, registered)

        if cls in self._factories:
            try:
                return cast(T, self._factories[cls](self))
            except DependencyResolutionError:
                raise
            except Exception as e:
                raise DependencyResolutionError(cls, f"Factory for {_name(cls)} failed: {e}") from e

        return self._create_instance(cls, chain)

    def _create_instance(self, cls: Type[T], chain: List[Type]) -> T:
        if inspect.isabstract(cls):
            raise DependencyResolutionError(cls, f"No registration for abstract type {_name(cls)}")
        try:
            signature = inspect.signature(cls.__init__, eval_str=True)
        except (NameError, TypeError, ValueError) as e:
            raise DependencyResolutionError(cls, f"Cannot inspect constructor of {_name(cls)}: {e}") from e

        kwargs: Dict[str, Any] = {}
        for param_name, param in list(signature.parameters.items())[1:]:
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue
            annotation = param.annotation
            has_default = param.default is not inspect.Parameter.empty
            if has_default and (annotation is inspect.Parameter.empty or not self.has(annotation)):
                continue
            if annotation is inspect.Parameter.empty:
                raise DependencyResolutionError(
                    cls, f"Parameter '{param_name}' of {_name(cls)} has no type annotation"
                )
            kwargs[param_name] = self.get(annotation, chain)

        logger.debug(f"Creating instance of {_name(cls)} with {sorted(kwargs)}")
        return cls(**kwargs)
