# citygrid/assets/importers/texture.py
from pathlib import Path

from PIL import Image

from citygrid.assets.importers.base import AssetImporter
from citygrid.assets.types import TextureData


class TextureImporter(AssetImporter[TextureData]):
    def import_file(self, path: Path) -> TextureData:
        with Image.open(path) as img:
            # OBJ texcoords put v=0 at the bottom of the image.
            converted = img.convert("RGBA").transpose(
                Image.Transpose.FLIP_TOP_BOTTOM
            )
            width, height = converted.size
            data = converted.tobytes()

        return TextureData(data=data, width=width, height=height, components=4)


def white_texture() -> TextureData:
    """1x1 opaque white, bound when a material has no diffuse map."""
    return TextureData(data=b"\xff\xff\xff\xff", width=1, height=1, components=4)
