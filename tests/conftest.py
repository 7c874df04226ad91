from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

import pytest

from geolayout import BoundingBox, MeasurementUnavailable, RenderSurface, get_layout_config, set_layout_config


class FakeNode:
    def __init__(self, kind: str):
        self.kind = kind
        self.attributes: Dict[str, Any] = {}
        self.children: List["FakeNode"] = []
        self.parent: Optional["FakeNode"] = None
        self.text: Optional[str] = None


class FakeSurface(RenderSurface):
    """Glyphs are 0.5em wide and 1.25em tall; ink starts 1 unit right, 0.75em above the baseline."""

    def __init__(self, measurable: bool = True):
        self._root = FakeNode("svg")
        self.measurable = measurable
        self.measurements = 0

    @property
    def root(self) -> FakeNode:
        return self._root

    def create_node(self, kind: str, attributes: Optional[Mapping[str, Any]] = None) -> FakeNode:
        node = FakeNode(kind)
        if attributes:
            self.set_attributes(node, attributes)
        return node

    def append(self, parent: FakeNode, child: FakeNode) -> None:
        child.parent = parent
        parent.children.append(child)

    def detach(self, node: FakeNode) -> None:
        if node.parent is not None:
            node.parent.children.remove(node)
            node.parent = None

    def set_attributes(self, node: FakeNode, attributes: Mapping[str, Any]) -> None:
        node.attributes.update(attributes)

    def set_text(self, node: FakeNode, text: str) -> None:
        node.text = text

    def measure(self, node: FakeNode) -> BoundingBox:
        if not self.measurable:
            raise MeasurementUnavailable("fake surface has no display")
        current = node
        while current is not None and current is not self._root:
            current = current.parent
        if current is None:
            raise MeasurementUnavailable("node is detached")
        self.measurements += 1
        size = float(node.attributes["font-size"])
        return BoundingBox(
            x=float(node.attributes["x"]) + 1.0,
            y=float(node.attributes["y"]) - 0.75 * size,
            width=0.5 * size * len(node.text or ""),
            height=1.25 * size,
        )

    def to_string(self) -> str:
        return repr(self._root.children)


@pytest.fixture
def surface() -> FakeSurface:
    return FakeSurface()


@pytest.fixture
def layout_config():
    saved = get_layout_config()
    yield saved
    set_layout_config(saved)
