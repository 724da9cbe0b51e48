import logging
from pathlib import Path

from tour.config import (
    GraphConfig,
    ObservabilityConfig,
    configure_logging,
    get_config,
    reset_config,
)


def test_defaults():
    config = get_config()

    assert config.http.port == 8080
    assert config.graph.routes_files == []
    assert config.graph.routes_paths == []
    assert config.graph.data_dir == config.project_root / "data"


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("TOUR_HTTP_PORT", "9090")
    monkeypatch.setenv("TOUR_GRAPH_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TOUR_GRAPH_ROUTES_FILES", '["a.csv", "b.csv"]')
    reset_config()

    config = get_config()

    assert config.http.port == 9090
    assert config.graph.routes_paths == [tmp_path / "a.csv", tmp_path / "b.csv"]


def test_absolute_route_files_ignore_data_dir(tmp_path):
    config = GraphConfig(data_dir=Path("/elsewhere"), routes_files=[str(tmp_path / "x.csv")])

    assert config.routes_paths == [tmp_path / "x.csv"]


def test_configure_logging_sets_root_level():
    root = logging.getLogger()
    saved_level, saved_handlers = root.level, root.handlers[:]
    try:
        configure_logging(ObservabilityConfig(level="debug"))
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
