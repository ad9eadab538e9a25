from __future__ import annotations

import pytest

from core.context import SettingsContext
from core.engine import ShellCore
from core.viewport import Viewport


@pytest.fixture
def context() -> SettingsContext:
    return SettingsContext()


@pytest.fixture
def core(context: SettingsContext) -> ShellCore:
    return ShellCore(Viewport.of(800, 600), context)
