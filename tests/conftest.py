"""
Shared fixtures for the Bureau test suite.

Nothing here touches the real desktop: commands go to a recording runner,
settings to an in-memory store, files to a temporary home directory.
"""

import io

import pytest
from rich.console import Console

from bureau.config import Paths
from bureau.context import InstallContext
from tests._helpers import FakeRunner, FakeSettings, ScriptedReporter


@pytest.fixture
def paths(tmp_path):
    home = tmp_path / "home"
    home.mkdir()
    return Paths.from_env(env={}, home=home)


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)


@pytest.fixture
def ui(console):
    return ScriptedReporter(console)


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def settings():
    return FakeSettings()


@pytest.fixture
def ctx(paths, runner, ui):
    return InstallContext(paths=paths, runner=runner, ui=ui)
