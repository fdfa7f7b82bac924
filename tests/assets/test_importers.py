import pytest
from PIL import Image

from citygrid.assets.importers.model import ModelImporter, resolve_resource
from citygrid.assets.importers.texture import TextureImporter, white_texture
from citygrid.assets.materials import DEFAULT_WHITE_TEXTURE
from citygrid.assets.types import LoadedModel, TextureData


def test_model_importer_reads_obj_and_materials(asset_dir):
    loaded = ModelImporter().import_file(asset_dir / "tile.obj")

    assert isinstance(loaded, LoadedModel)
    assert loaded.path == str(asset_dir / "tile.obj")
    assert loaded.model.material_libs == ("tile.mtl",)
    assert loaded.materials["asphalt"].diffuse == (0.2, 0.2, 0.2)

    geo = loaded.model.geometries[0]
    assert geo.object_name == "tile"
    assert geo.material == "asphalt"
    # Quad triangulated into two triangles.
    assert geo.vertex_count == 6


def test_model_importer_loads_textures_once(asset_dir):
    loaded = ModelImporter().import_file(asset_dir / "tile.obj")

    assert set(loaded.textures) == {DEFAULT_WHITE_TEXTURE, "tex/asphalt.png"}
    tex = loaded.textures["tex/asphalt.png"]
    assert (tex.width, tex.height, tex.components) == (2, 2, 4)


def test_model_importer_can_skip_textures(asset_dir):
    loaded = ModelImporter(load_textures=False).import_file(
        asset_dir / "tile.obj"
    )
    assert loaded.textures == {}


def test_model_importer_uses_custom_resolver(asset_dir, tmp_path_factory):
    other = tmp_path_factory.mktemp("libs")
    (other / "tile.mtl").write_text("newmtl asphalt\nKd 0.9 0.9 0.9\n")

    importer = ModelImporter(resolver=lambda base, ref: other / ref)
    loaded = importer.import_file(asset_dir / "tile.obj")

    assert loaded.materials["asphalt"].diffuse == (0.9, 0.9, 0.9)


def test_model_importer_invalid_file(tmp_path):
    f = tmp_path / "empty.obj"
    f.write_text("")

    with pytest.raises(ValueError, match="No geometry found"):
        ModelImporter().import_file(f)


def test_model_importer_missing_library(tmp_path):
    f = tmp_path / "lonely.obj"
    f.write_text("mtllib gone.mtl\nv 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n")

    with pytest.raises(FileNotFoundError):
        ModelImporter().import_file(f)


def test_resolve_resource(tmp_path):
    base = tmp_path / "models" / "house.obj"
    assert resolve_resource(base, "house.mtl") == tmp_path / "models" / "house.mtl"
    assert resolve_resource(base, "../tex/a.png") == (
        tmp_path / "models" / ".." / "tex" / "a.png"
    )
    assert resolve_resource(base, str(tmp_path / "abs.png")) == tmp_path / "abs.png"


def test_texture_importer_png(tmp_path):
    # Top row red, bottom row blue.
    img = Image.new("RGB", (1, 2), color="red")
    img.putpixel((0, 1), (0, 0, 255))
    f = tmp_path / "test.png"
    img.save(f)

    tex_data = TextureImporter().import_file(f)

    assert isinstance(tex_data, TextureData)
    assert tex_data.width == 1
    assert tex_data.height == 2
    assert tex_data.components == 4  # Should always convert to RGBA
    # Flipped so the first row in memory is the bottom of the image.
    assert tex_data.data[:4] == bytes((0, 0, 255, 255))


def test_white_texture():
    tex = white_texture()
    assert tex.data == b"\xff" * 4
    assert (tex.width, tex.height) == (1, 1)
