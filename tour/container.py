"""Dependency injection container.

Both front ends build their object graph through it. Every binding is
created once, on its first resolve, and shared afterwards.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Sequence, Union

from .config import AppConfig, get_config


@dataclass
class Container:
    """Lazily built, shared instances keyed by port type.

    Usage:
        container = Container.create_default(extra_paths=["routes.csv"])
        service = container.resolve(RouteService)
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _instances: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(self, port_type: type[Any], factory: Callable[[], Any]) -> None:
        """Bind a factory to a port type, replacing any earlier binding."""
        with self._lock:
            self._factories[port_type] = factory
            self._instances.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return the shared instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")
            if port_type not in self._instances:
                self._instances[port_type] = self._factories[port_type]()
            return self._instances[port_type]

    @classmethod
    def create_default(
        cls,
        config: Optional[AppConfig] = None,
        extra_paths: Sequence[Union[str, Path]] = (),
        skip_invalid_files: bool = False,
    ) -> Container:
        """Create a container with default production bindings.

        The route graph is loaded lazily, on the first resolve of
        RouteStorePort or RouteService.

        Args:
            config: Optional configuration override.
            extra_paths: Route CSV files to load after the configured ones.
            skip_invalid_files: Log unreadable route files instead of raising.
        """
        from .adapters.graph import CSVRouteRepository, DijkstraRouteSolver
        from .ports.graph import RouteRepositoryPort, RouteSolverPort, RouteStorePort
        from .services import RouteService

        config = config or get_config()
        container = cls(config=config)

        container.register(
            RouteRepositoryPort,
            lambda: CSVRouteRepository(
                config.graph,
                extra_paths=tuple(extra_paths),
                skip_invalid=skip_invalid_files,
            ),
        )
        container.register(
            RouteStorePort,
            lambda: container.resolve(RouteRepositoryPort).load(),
        )
        container.register(RouteSolverPort, lambda: DijkstraRouteSolver())

        def create_route_service() -> RouteService:
            return RouteService(
                tour=container.resolve(RouteStorePort),
                route_solver=container.resolve(RouteSolverPort),
            )

        container.register(RouteService, create_route_service)

        return container
