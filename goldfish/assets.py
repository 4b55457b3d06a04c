"""Records for textures, fonts, meshes, models and resource entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Sequence

from goldfish.graphic import Color
from goldfish.vecmath import Vector


def _require_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative")


@dataclass
class Texture:
    """A texture and its size.

    ``internal_width`` and ``internal_height`` are the size the drawing
    driver actually allocated; they default to the visible size and may
    never be smaller than it.
    """

    width: int
    height: int
    internal_width: Optional[int] = None
    internal_height: Optional[int] = None
    keep_aspect: bool = False
    draw_driver_texture: Any = None

    def __post_init__(self) -> None:
        if self.internal_width is None:
            self.internal_width = self.width
        if self.internal_height is None:
            self.internal_height = self.height
        _require_non_negative(width=self.width, height=self.height)
        if self.internal_width < self.width:
            raise ValueError("internal width is smaller than width")
        if self.internal_height < self.height:
            raise ValueError("internal height is smaller than height")
        self.keep_aspect = bool(self.keep_aspect)


@dataclass(frozen=True)
class FontBoundingBox:
    """Bounding box of a glyph or font."""

    width: int = 0
    height: int = 0
    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        _require_non_negative(width=self.width, height=self.height)


@dataclass
class FontGlyph:
    """A single glyph: its character code, bitmap layout and advance."""

    code: int
    bbox: FontBoundingBox = field(default_factory=FontBoundingBox)
    bpl: int = 0
    dwidth: tuple[int, int] = (0, 0)
    texture: Optional[Texture] = None

    def __post_init__(self) -> None:
        if self.code < 0:
            raise ValueError("character code must not be negative")
        _require_non_negative(bpl=self.bpl)
        dwidth = tuple(self.dwidth)
        if len(dwidth) != 2:
            raise ValueError("device width needs exactly two components")
        self.dwidth = (int(dwidth[0]), int(dwidth[1]))


@dataclass
class FontCache:
    """A rendered text texture together with the parameters that produced it.

    ``lw`` and ``lh`` are the width and height limits the text was laid
    out against.
    """

    text: str
    size: float
    width: float = 0.0
    height: float = 0.0
    texture: Optional[Texture] = None
    lw: float = 0.0
    lh: float = 0.0

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError("font size must be positive")


def _point(p: Sequence[float]) -> Vector:
    if len(p) < 3:
        raise ValueError("a point needs at least three coordinates")
    return (float(p[0]), float(p[1]), float(p[2]))


@dataclass
class Triangle:
    """A coloured triangle of three points."""

    points: tuple[Vector, Vector, Vector]
    color: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0, 1.0))

    def __post_init__(self) -> None:
        points = tuple(self.points)
        if len(points) != 3:
            raise ValueError("a triangle needs exactly three points")
        self.points = (_point(points[0]), _point(points[1]), _point(points[2]))


@dataclass
class Mesh:
    """An ordered collection of triangles."""

    triangles: list[Triangle] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.triangles = list(self.triangles)

    def __len__(self) -> int:
        return len(self.triangles)

    def __iter__(self) -> Iterator[Triangle]:
        return iter(self.triangles)


@dataclass
class Model:
    """A mesh paired with the texture drawn on it."""

    mesh: Mesh = field(default_factory=Mesh)
    texture: Optional[Texture] = None


@dataclass
class ResourceEntry:
    """An entry of a resource pack.

    ``size`` is the stored (compressed) size and ``ogsize`` the size after
    decompression. ``cache`` holds the decompressed data once it is known.
    """

    key: str
    ogsize: int
    compressed: Optional[bytes] = None
    size: Optional[int] = None
    cache: Optional[bytes] = None

    def __post_init__(self) -> None:
        if self.compressed is not None:
            self.compressed = bytes(self.compressed)
            if self.size is None:
                self.size = len(self.compressed)
            elif self.size != len(self.compressed):
                raise ValueError("size does not match the compressed data")
        elif self.size is None:
            self.size = 0
        _require_non_negative(size=self.size, ogsize=self.ogsize)
        if self.cache is not None:
            self.cache = bytes(self.cache)
            if len(self.cache) != self.ogsize:
                raise ValueError("cached data does not match the original size")