"""Shared pytest fixtures for arenagraph tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from arenagraph import Graph, NodeId


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Strip ARENAGRAPH_* variables so the host environment never leaks in."""
    for key in list(os.environ):
        if key.startswith("ARENAGRAPH_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by CLI and logging tests."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    root_level = root.level
    names = ("arenagraph", "arenagraph.core")
    levels = {name: logging.getLogger(name).level for name in names}
    yield
    root.handlers = handlers
    root.setLevel(root_level)
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no arenagraph.toml is discovered."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture(params=[False, True], ids=["scan", "incidence"])
def graph(request: pytest.FixtureRequest) -> Graph[str, str]:
    """Empty graph, once per edge-index mode."""
    return Graph(incidence_index=request.param)


@pytest.fixture
def abc(graph: Graph[str, str]) -> tuple[NodeId, NodeId, NodeId]:
    """Chain A - B - C with edges labelled ``ab`` and ``bc``."""
    a = graph.add_node("A")
    b = graph.add_node("B")
    c = graph.add_node("C")
    graph.add_edge(a, b, "ab")
    graph.add_edge(b, c, "bc")
    return a, b, c
