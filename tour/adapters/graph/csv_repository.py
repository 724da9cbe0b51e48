"""CSV route repository adapter.

Builds a Tour from the route files named in the configuration plus
any extra files given by the front end, and caches it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ...config import GraphConfig, get_config
from ...domain.errors import BulkLoadError, GraphError
from ...graph.load_graph import load_routes
from ...graph.tour import Tour


@dataclass
class CSVRouteRepository:
    """Route repository that loads from CSV files.

    This adapter implements RouteRepositoryPort. Files are loaded in
    order into a single Tour: configured files first, then ``extra_paths``.

    Attributes:
        config: Graph configuration (data directory, file names)
        extra_paths: Additional CSV files, e.g. from the command line
        skip_invalid: Log and skip files that fail to load instead of
            raising. Routes read before the failure are kept.
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    extra_paths: Sequence[Union[str, Path]] = field(default_factory=tuple)
    skip_invalid: bool = False
    _logger: logging.Logger = field(init=False, repr=False)

    _tour: Optional[Tour] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def paths(self) -> List[Path]:
        """Every CSV file this repository reads, in load order."""
        return self.config.routes_paths + [Path(p) for p in self.extra_paths]

    def load(self) -> Tour:
        """Load the route graph from CSV files.

        Returns:
            The populated Tour.

        Raises:
            GraphError: If a file cannot be read.
            BulkLoadError: If a file holds a malformed record.
        """
        if self._tour is not None:
            return self._tour

        tour = Tour()
        for path in self.paths:
            try:
                self.load_file(tour, path)
            except (GraphError, BulkLoadError) as e:
                if not self.skip_invalid:
                    raise
                self._logger.error(
                    "Skipping route file",
                    extra={"file_path": str(path), "error": str(e)},
                )

        self._tour = tour
        self._logger.info("Routes loaded", extra={"cities": len(tour)})
        return tour

    def load_file(self, tour: Tour, path: Union[str, Path]) -> int:
        """Add the routes of one CSV file to ``tour``.

        Returns:
            The number of routes read from the file.
        """
        path = Path(path)
        self._logger.debug("Loading routes", extra={"file_path": str(path)})

        try:
            with path.open(encoding=self.config.encoding, newline="") as f:
                count = load_routes(tour, f)
        except OSError as e:
            raise GraphError(
                "cannot open route file",
                file_path=str(path),
                cause=e,
            )
        except BulkLoadError as e:
            e.file_path = str(path)
            self._logger.warning(
                "Malformed route file",
                extra={"file_path": str(path), "line_number": e.line_number},
            )
            raise

        self._logger.debug(
            "Route file loaded",
            extra={"file_path": str(path), "routes": count},
        )
        return count

    def clear_cache(self) -> None:
        """Drop the cached Tour so the next load() reads the files again."""
        self._tour = None
        self._logger.debug("Route cache cleared")
