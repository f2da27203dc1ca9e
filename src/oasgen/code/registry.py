"""Backend registry -- discovery and lookup of code backends.

The built-in backends (``rust``, ``python`` and ``none``) are always
available. Third-party packages add backends by declaring an entry point
in the ``oasgen.backends`` group of their ``pyproject.toml``::

    [project.entry-points."oasgen.backends"]
    go = "oasgen_go.backend:GoBackend"

The entry point must name a :class:`~oasgen.code.backend.Backend` subclass
with a no-argument constructor.
"""

from __future__ import annotations

import importlib.metadata
import logging
from typing import Optional

from oasgen.code.backend import Backend, NullBackend, PythonBackend, RustBackend
from oasgen.exceptions import BackendError, InvalidUsageError

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "oasgen.backends"
"""The entry-point group name used for backend discovery."""

DEFAULT_BACKEND = "rust"

_BUILTIN_BACKENDS: tuple[type[Backend], ...] = (RustBackend, PythonBackend, NullBackend)


class BackendRegistry:
    """Holds the available backends, keyed by name.

    Example:
        Typical usage::

            registry = BackendRegistry()
            registry.discover()
            backend = registry.get("rust")
    """

    def __init__(self, include_builtins: bool = True) -> None:
        self._backends: dict[str, Backend] = {}
        if include_builtins:
            for backend_cls in _BUILTIN_BACKENDS:
                self.register(backend_cls())

    def register(self, backend: Backend) -> None:
        """Register *backend* under its :attr:`~Backend.name`.

        Raises:
            BackendError: If a backend with the same name is already registered.
        """
        name = backend.name
        if name in self._backends:
            raise BackendError(f"Backend '{name}' is already registered")
        self._backends[name] = backend
        logger.debug("Registered backend '%s'", name)

    def discover(self) -> list[str]:
        """Load backends registered in the ``oasgen.backends`` entry-point group.

        Returns:
            The names of the backends that were loaded. Entry points that
            fail to load are logged as warnings and skipped.
        """
        loaded: list[str] = []
        for ep in importlib.metadata.entry_points(group=ENTRY_POINT_GROUP):
            try:
                backend_cls = ep.load()
                backend = backend_cls()
                if not isinstance(backend, Backend):
                    raise BackendError(
                        f"Entry point '{ep.name}' does not provide a Backend "
                        f"(got {type(backend).__name__})"
                    )
                self.register(backend)
                loaded.append(backend.name)
            except Exception as exc:
                logger.warning("Failed to load backend '%s': %s", ep.name, exc)
        return loaded

    def get(self, name: str) -> Backend:
        """Return the backend registered as *name*.

        Raises:
            InvalidUsageError: If no such backend is registered.
        """
        try:
            return self._backends[name]
        except KeyError:
            available = ", ".join(self.names())
            raise InvalidUsageError(
                f"Unknown backend '{name}'. Available backends: {available}"
            ) from None

    def names(self) -> list[str]:
        """Return the registered backend names, sorted."""
        return sorted(self._backends)

    def backends(self) -> list[Backend]:
        """Return the registered backends, sorted by name."""
        return [self._backends[name] for name in self.names()]


_registry: Optional[BackendRegistry] = None


def get_registry() -> BackendRegistry:
    """Return the process-wide registry, discovering plugins on first use."""
    global _registry
    if _registry is None:
        _registry = BackendRegistry()
        _registry.discover()
    return _registry


def reset_registry() -> None:
    """Drop the process-wide registry. Used by tests."""
    global _registry
    _registry = None


def get_backend(name: str) -> Backend:
    """Return the backend called *name* from the process-wide registry.

    Raises:
        InvalidUsageError: If no such backend exists.
    """
    return get_registry().get(name)
