# citygrid/assets/importers/obj.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Dict, List, Optional, Sequence, Tuple

from citygrid.assets.importers.grammar import (
    Statement,
    iter_statements,
    parse_float,
    parse_floats,
    parse_int,
)
from citygrid.assets.types import ATTRIBUTE_COMPONENTS, Geometry, ParsedModel
from citygrid.errors import BadIndexError, UnterminatedFaceError
from citygrid.types import Vec2, Vec3

logger = logging.getLogger(__name__)

# Face-vertex components in `pos/tex/norm` order.
_FACE_STREAMS = ("position", "texcoord", "normal")

_WHITE: Vec3 = (1.0, 1.0, 1.0)


class ObjKeyword(StrEnum):
    VERTEX = "v"
    TEXCOORD = "vt"
    NORMAL = "vn"
    FACE = "f"
    GROUP = "g"
    OBJECT = "o"
    USE_MATERIAL = "usemtl"
    MATERIAL_LIB = "mtllib"
    SMOOTHING = "s"

    @classmethod
    def lookup(cls, token: str) -> Optional[ObjKeyword]:
        """Return the keyword for `token`, or None if it is not supported."""
        try:
            return cls(token)
        except ValueError:
            return None


@dataclass(slots=True)
class _GeometryBuilder:
    object_name: str
    groups: Tuple[str, ...]
    material: str
    data: Dict[str, List[float]] = field(
        default_factory=lambda: {kind: [] for kind in ATTRIBUTE_COMPONENTS}
    )

    @property
    def has_vertices(self) -> bool:
        return bool(self.data["position"])

    def freeze(self, with_colors: bool = False) -> Geometry:
        if with_colors:
            # Vertices emitted before the first colored `v` got no color;
            # they always form a prefix of the stream.
            missing = len(self.data["position"]) - len(self.data["color"])
            self.data["color"][:0] = _WHITE * (missing // 3)
        # Streams that never received data are dropped, not kept empty.
        data = {kind: tuple(vals) for kind, vals in self.data.items() if vals}
        return Geometry(
            object_name=self.object_name,
            groups=self.groups,
            material=self.material,
            data=data,
        )


@dataclass(slots=True)
class _ObjParseState:
    # Index 0 of each pool is a sentinel so OBJ's 1-based indices map directly.
    positions: List[Vec3] = field(default_factory=lambda: [(0.0, 0.0, 0.0)])
    texcoords: List[Vec2] = field(default_factory=lambda: [(0.0, 0.0)])
    normals: List[Vec3] = field(default_factory=lambda: [(0.0, 0.0, 0.0)])
    colors: List[Vec3] = field(default_factory=lambda: [(0.0, 0.0, 0.0)])

    material_libs: List[str] = field(default_factory=list)
    geometries: List[_GeometryBuilder] = field(default_factory=list)
    current: Optional[_GeometryBuilder] = None

    object_name: str = "default"
    groups: Tuple[str, ...] = ("default",)
    material: str = "default"

    def pool(self, stream: str) -> Sequence[tuple]:
        if stream == "position":
            return self.positions
        if stream == "texcoord":
            return self.texcoords
        return self.normals

    @property
    def has_colors(self) -> bool:
        return len(self.colors) > 1

    def break_geometry(self) -> None:
        """
        Release the current geometry if it already holds vertices.
        Consecutive breaks without faces in between collapse into one.
        """
        if self.current is not None and self.current.has_vertices:
            self.current = None

    def ensure_geometry(self) -> _GeometryBuilder:
        if self.current is None:
            self.current = _GeometryBuilder(
                object_name=self.object_name,
                groups=self.groups,
                material=self.material,
            )
            self.geometries.append(self.current)
        return self.current


class ObjParser:
    """
    Parses the subset of Wavefront OBJ used by the city assets.

    Supported:
      - v (with optional trailing r g b vertex colors), vt, vn
      - f with any number (>= 3) of vertices, fan-triangulated
      - o, g, usemtl, mtllib
      - s (accepted and ignored)

    The parser keeps no state between calls and is safe to share across
    threads.
    """

    def parse(self, text: str) -> ParsedModel:
        state = _ObjParseState()

        for stmt in iter_statements(text):
            keyword = ObjKeyword.lookup(stmt.keyword)
            if keyword is None:
                logger.warning(
                    "Unhandled OBJ keyword %r on line %d",
                    stmt.keyword,
                    stmt.line_no,
                )
                continue
            self._dispatch(state, keyword, stmt)

        geometries = tuple(
            g.freeze(state.has_colors)
            for g in state.geometries
            if g.has_vertices
        )
        return ParsedModel(
            geometries=geometries,
            material_libs=tuple(state.material_libs),
        )

    def _dispatch(
        self, state: _ObjParseState, keyword: ObjKeyword, stmt: Statement
    ) -> None:
        if keyword is ObjKeyword.VERTEX:
            _add_position(state, stmt)

        elif keyword is ObjKeyword.TEXCOORD:
            # `w` is optional and unused; a missing `v` defaults to 0.
            parts = stmt.parts if len(stmt.parts) != 1 else [stmt.parts[0], "0"]
            u, v = parse_floats(parts, 2, stmt.line_no)
            state.texcoords.append((u, v))

        elif keyword is ObjKeyword.NORMAL:
            nx, ny, nz = parse_floats(stmt.parts, 3, stmt.line_no)
            state.normals.append((nx, ny, nz))

        elif keyword is ObjKeyword.FACE:
            _add_face(state, stmt)

        elif keyword is ObjKeyword.USE_MATERIAL:
            state.material = stmt.unparsed
            state.break_geometry()

        elif keyword is ObjKeyword.GROUP:
            state.groups = tuple(stmt.parts) or ("default",)
            state.break_geometry()

        elif keyword is ObjKeyword.OBJECT:
            state.object_name = stmt.unparsed
            state.break_geometry()

        elif keyword is ObjKeyword.MATERIAL_LIB:
            # One library per line; names may contain spaces.
            state.material_libs.append(stmt.unparsed)

        elif keyword is ObjKeyword.SMOOTHING:
            pass


def parse_obj(text: str) -> ParsedModel:
    return ObjParser().parse(text)


def _add_position(state: _ObjParseState, stmt: Statement) -> None:
    px, py, pz = parse_floats(stmt.parts, 3, stmt.line_no)
    state.positions.append((px, py, pz))

    extra = stmt.parts[3:]
    if len(extra) >= 3:
        r, g, b = (parse_float(t, stmt.line_no) for t in extra[:3])
        # Keep the color pool aligned with the position pool.
        while len(state.colors) < len(state.positions) - 1:
            state.colors.append(_WHITE)
        state.colors.append((r, g, b))
    elif extra:
        # A single trailing value is the homogeneous weight; validate it.
        for t in extra:
            parse_float(t, stmt.line_no)


def _add_face(state: _ObjParseState, stmt: Statement) -> None:
    if len(stmt.parts) < 3:
        raise UnterminatedFaceError(
            f"face needs at least 3 vertices, got {len(stmt.parts)}",
            stmt.line_no,
        )

    geometry = state.ensure_geometry()

    # Fan triangulation around the first vertex.
    apex = stmt.parts[0]
    for tri in range(len(stmt.parts) - 2):
        _add_vertex(state, geometry, apex, stmt.line_no)
        _add_vertex(state, geometry, stmt.parts[tri + 1], stmt.line_no)
        _add_vertex(state, geometry, stmt.parts[tri + 2], stmt.line_no)


def _add_vertex(
    state: _ObjParseState,
    geometry: _GeometryBuilder,
    token: str,
    line_no: int,
) -> None:
    components = token.split("/")
    if not components[0]:
        raise BadIndexError(f"face vertex {token!r} has no position", line_no)

    for stream, raw in zip(_FACE_STREAMS, components):
        if not raw:
            continue  # `1//3` style: component absent

        pool = state.pool(stream)
        index = _resolve_index(pool, raw, line_no)
        geometry.data[stream].extend(pool[index])

        if stream == "position" and state.has_colors:
            color = (
                state.colors[index] if index < len(state.colors) else _WHITE
            )
            geometry.data["color"].extend(color)


def _resolve_index(pool: Sequence[tuple], raw: str, line_no: int) -> int:
    """
    1-based indices map straight onto the sentinel-padded pool.
    Negative indices count back from the end of the pool.
    """
    idx = parse_int(raw, line_no)
    resolved = idx if idx >= 0 else len(pool) + idx

    if resolved <= 0 or resolved >= len(pool):
        raise BadIndexError(
            f"index {idx} out of range for pool of {len(pool) - 1}", line_no
        )
    return resolved
