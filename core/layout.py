"""Named layout rules and the engine that evaluates them against a viewport."""

from __future__ import annotations

import logging
from typing import Callable, Dict, NamedTuple, Optional

from core.viewport import Viewport


class Geometry(NamedTuple):
    """Centre position plus optional size and font scale of one element."""

    x: float
    y: float
    width: Optional[float] = None
    height: Optional[float] = None
    font_scale: Optional[float] = None

    def contains(self, px: float, py: float) -> bool:
        if self.width is None or self.height is None:
            return False
        return abs(px - self.x) <= self.width / 2 and abs(py - self.y) <= self.height / 2


LayoutRule = Callable[[Viewport], Geometry]


class LayoutEngine:
    """Holds the (element id, rule) bindings of the active screen."""

    def __init__(self) -> None:
        self._rules: Dict[str, LayoutRule] = {}
        self._interactive: set[str] = set()

    def __contains__(self, element_id: str) -> bool:
        return element_id in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def register(self, element_id: str, rule: LayoutRule, interactive: bool = False) -> None:
        self._rules[element_id] = rule
        if interactive:
            self._interactive.add(element_id)
        else:
            self._interactive.discard(element_id)

    def unregister(self, element_id: str) -> None:
        self._rules.pop(element_id, None)
        self._interactive.discard(element_id)

    def clear(self) -> None:
        self._rules.clear()
        self._interactive.clear()

    def recompute(self, viewport: Viewport) -> Dict[str, Geometry]:
        """Evaluate every registered rule; the caller applies the result."""
        geometries = {element_id: rule(viewport) for element_id, rule in self._rules.items()}
        logging.debug("Layout recomputed for %dx%d (%d elements)", viewport.width, viewport.height, len(geometries))
        return geometries

    def element_at(self, geometries: Dict[str, Geometry], x: float, y: float) -> Optional[str]:
        """Return the topmost interactive element under a point, if any."""
        for element_id in reversed(list(self._rules)):
            if element_id not in self._interactive:
                continue
            geometry = geometries.get(element_id)
            if geometry is not None and geometry.contains(x, y):
                return element_id
        return None
