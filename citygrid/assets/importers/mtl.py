# citygrid/assets/importers/mtl.py
from __future__ import annotations

import logging
from enum import StrEnum
from typing import Any, Dict, Optional

from citygrid.assets.importers.grammar import (
    Statement,
    iter_statements,
    parse_float,
    parse_floats,
    parse_int,
)
from citygrid.assets.types import MaterialRecord
from citygrid.errors import NoActiveMaterialError

logger = logging.getLogger(__name__)


class MtlKeyword(StrEnum):
    NEW_MATERIAL = "newmtl"
    SHININESS = "Ns"
    AMBIENT = "Ka"
    DIFFUSE = "Kd"
    SPECULAR = "Ks"
    EMISSIVE = "Ke"
    DIFFUSE_MAP = "map_Kd"
    SPECULAR_MAP = "map_Ns"
    BUMP_MAP = "map_Bump"
    OPTICAL_DENSITY = "Ni"
    DISSOLVE = "d"
    ILLUMINATION = "illum"

    @classmethod
    def lookup(cls, token: str) -> Optional[MtlKeyword]:
        try:
            return cls(token)
        except ValueError:
            return None


_SCALARS = {
    MtlKeyword.SHININESS: "shininess",
    MtlKeyword.OPTICAL_DENSITY: "optical_density",
    MtlKeyword.DISSOLVE: "opacity",
}

_COLORS = {
    MtlKeyword.AMBIENT: "ambient",
    MtlKeyword.DIFFUSE: "diffuse",
    MtlKeyword.SPECULAR: "specular",
    MtlKeyword.EMISSIVE: "emissive",
}

_MAPS = {
    MtlKeyword.DIFFUSE_MAP: "diffuse_map",
    MtlKeyword.SPECULAR_MAP: "specular_map",
    MtlKeyword.BUMP_MAP: "normal_map",
}


class MtlParser:
    """
    Parses Wavefront MTL text into MaterialRecords keyed by material name.

    Texture statements keep their raw argument string; map options such as
    `-s` or `-o` are passed through untouched.
    """

    def parse(self, text: str) -> Dict[str, MaterialRecord]:
        # Records are built as plain dicts and frozen at the end.
        fields: Dict[str, Dict[str, Any]] = {}
        active: Optional[Dict[str, Any]] = None

        for stmt in iter_statements(text):
            keyword = MtlKeyword.lookup(stmt.keyword)
            if keyword is None:
                logger.warning(
                    "Unhandled MTL keyword %r on line %d",
                    stmt.keyword,
                    stmt.line_no,
                )
                continue

            if keyword is MtlKeyword.NEW_MATERIAL:
                active = {}
                fields[stmt.unparsed] = active
                continue

            if active is None:
                raise NoActiveMaterialError(
                    f"{stmt.keyword!r} before any newmtl", stmt.line_no
                )
            self._apply(active, keyword, stmt)

        return {name: MaterialRecord(**vals) for name, vals in fields.items()}

    def _apply(
        self, record: Dict[str, Any], keyword: MtlKeyword, stmt: Statement
    ) -> None:
        if keyword in _SCALARS:
            record[_SCALARS[keyword]] = parse_float(
                _first(stmt), stmt.line_no
            )
        elif keyword in _COLORS:
            record[_COLORS[keyword]] = parse_floats(stmt.parts, 3, stmt.line_no)
        elif keyword in _MAPS:
            record[_MAPS[keyword]] = stmt.unparsed
        elif keyword is MtlKeyword.ILLUMINATION:
            record["illum"] = parse_int(_first(stmt), stmt.line_no)


def parse_mtl(text: str) -> Dict[str, MaterialRecord]:
    return MtlParser().parse(text)


def _first(stmt: Statement) -> str:
    # An empty argument list surfaces as a malformed number downstream.
    return stmt.parts[0] if stmt.parts else ""
