"""Output surfaces the layout engine renders onto.

The engine only needs to create typed nodes, attach them, and ask a text node
for its rendered bounding box. :class:`SvgSurface` does this with ``lxml``
and measures glyphs with Pillow.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from lxml import etree
from PIL import ImageFont

from .errors import MeasurementUnavailable

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"

# Serialises every attach/measure/detach cycle on any surface.
_SCRATCH_LOCK = threading.Lock()


@dataclass(frozen=True)
class BoundingBox:
    x: float
    y: float
    width: float
    height: float


def format_number(value: float) -> str:
    text = f"{float(value):.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def _format_attribute(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


class RenderSurface(ABC):
    """Minimal node-tree interface used by elements while rendering."""

    @property
    @abstractmethod
    def root(self) -> Any:
        ...

    @abstractmethod
    def create_node(self, kind: str, attributes: Optional[Mapping[str, Any]] = None) -> Any:
        ...

    @abstractmethod
    def append(self, parent: Any, child: Any) -> None:
        ...

    @abstractmethod
    def detach(self, node: Any) -> None:
        ...

    @abstractmethod
    def set_attributes(self, node: Any, attributes: Mapping[str, Any]) -> None:
        ...

    @abstractmethod
    def set_text(self, node: Any, text: str) -> None:
        ...

    @abstractmethod
    def measure(self, node: Any) -> BoundingBox:
        """Return the rendered bounding box of an attached text node."""

    @abstractmethod
    def to_string(self) -> str:
        ...

    @contextmanager
    def scratch(self) -> Iterator[Any]:
        """Yield a hidden region attached to the root; it is always detached on exit."""

        with _SCRATCH_LOCK:
            region = self.create_node("g", {"visibility": "hidden", "aria-hidden": "true"})
            self.append(self.root, region)
            try:
                yield region
            finally:
                self.detach(region)


def _tag(kind: str) -> str:
    return f"{{{SVG_NS}}}{kind}"


class SvgSurface(RenderSurface):
    """SVG document held as an ``lxml`` tree."""

    def __init__(self, root: Optional[etree._Element] = None, font_path: Optional[str] = None):
        self._root = root if root is not None else etree.Element(_tag("svg"), nsmap={None: SVG_NS})
        self.font_path = font_path
        self._fonts: Dict[Tuple[Optional[str], float], Any] = {}

    @property
    def root(self) -> etree._Element:
        return self._root

    def create_node(self, kind: str, attributes: Optional[Mapping[str, Any]] = None) -> etree._Element:
        node = etree.Element(_tag(kind))
        if attributes:
            self.set_attributes(node, attributes)
        return node

    def append(self, parent: etree._Element, child: etree._Element) -> None:
        parent.append(child)

    def detach(self, node: etree._Element) -> None:
        parent = node.getparent()
        if parent is not None:
            parent.remove(node)

    def set_attributes(self, node: etree._Element, attributes: Mapping[str, Any]) -> None:
        for key, value in attributes.items():
            if value is None:
                continue
            node.set(key, _format_attribute(value))

    def set_text(self, node: etree._Element, text: str) -> None:
        node.text = text

    def _is_attached(self, node: etree._Element) -> bool:
        current = node
        while current is not None:
            if current is self._root:
                return True
            current = current.getparent()
        return False

    def _font(self, family: Optional[str], size: float):
        key = (family, size)
        font = self._fonts.get(key)
        if font is not None:
            return font
        source = self.font_path or family
        font = None
        if source:
            try:
                font = ImageFont.truetype(source, size)
            except OSError:
                logger.debug("Font %r not loadable, falling back to the default font", source)
        if font is None:
            font = ImageFont.load_default(size)
        self._fonts[key] = font
        return font

    def measure(self, node: etree._Element) -> BoundingBox:
        if etree.QName(node).localname != "text":
            raise MeasurementUnavailable(f"cannot measure <{etree.QName(node).localname}> nodes")
        if not self._is_attached(node):
            raise MeasurementUnavailable("text node is not attached to the surface root")
        try:
            size = float(node.get("font-size", "16"))
            x = float(node.get("x", "0"))
            y = float(node.get("y", "0"))
        except ValueError as exc:
            raise MeasurementUnavailable(f"text node has non-numeric geometry: {exc}") from exc
        font = self._font(node.get("font-family"), size)
        left, top, right, bottom = font.getbbox(node.text or "", anchor="ls")
        box = BoundingBox(x + left, y + top, right - left, bottom - top)
        logger.debug("Measured %r at size %s -> %s", node.text, format_number(size), box)
        return box

    def to_string(self) -> str:
        return etree.tostring(self._root, pretty_print=True, encoding="unicode")


__all__ = ["BoundingBox", "RenderSurface", "SvgSurface", "SVG_NS", "format_number"]
