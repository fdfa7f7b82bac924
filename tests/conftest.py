import pytest
from PIL import Image

from citygrid.assets.catalog import AssetCatalog
from citygrid.assets.importers.obj import parse_obj
from citygrid.constants import ROLE_BUILDINGS, ROLE_ROADS

QUAD_OBJ = """
mtllib tile.mtl
o tile
v 0.0 0.0 0.0
v 2.0 0.0 0.0
v 2.0 0.0 2.0
v 0.0 0.0 2.0
vn 0.0 1.0 0.0
usemtl asphalt
f 1//1 2//1 3//1 4//1
"""

TILE_MTL = """
newmtl asphalt
Kd 0.2 0.2 0.2
Ns 10
"""

ROAD_NAMES = ["road_tsplit", "road_junction", "road_corner", "road_straight"]
BUILDING_NAMES = ["building_A", "building_B", "building_C"]


@pytest.fixture
def quad_model():
    return parse_obj(QUAD_OBJ)


@pytest.fixture
def catalog(quad_model):
    """Catalog with the four road variants and three buildings."""
    cat = AssetCatalog()
    for name in ROAD_NAMES:
        cat.load(ROLE_ROADS, quad_model, {}, path=f"{name}.obj")
    for name in BUILDING_NAMES:
        cat.load(ROLE_BUILDINGS, quad_model, {}, path=f"{name}.obj")
    return cat


@pytest.fixture
def asset_dir(tmp_path):
    """Directory holding a textured tile model and its material library."""
    (tmp_path / "tile.obj").write_text(QUAD_OBJ)
    (tmp_path / "tile.mtl").write_text(TILE_MTL + "map_Kd tex/asphalt.png\n")
    (tmp_path / "tex").mkdir()
    Image.new("RGB", (2, 2), color="gray").save(tmp_path / "tex" / "asphalt.png")
    return tmp_path
