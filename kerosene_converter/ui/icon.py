# kerosene_converter/ui/icon.py
from PIL import Image, ImageDraw

from kerosene_converter.config import COLOR_ACCENT, COLOR_BG

ICON_SIZE = 64


def build_icon_image(size: int = ICON_SIZE) -> Image.Image:
    """Desenha o ícone da janela (gota de combustível) sem arquivos externos."""
    img = Image.new("RGBA", (size, size), COLOR_BG)
    draw = ImageDraw.Draw(img)

    pad = size // 8
    # Drop: circle at the bottom, triangle pointing up
    draw.ellipse((pad, size // 3, size - pad, size - pad), fill=COLOR_ACCENT)
    draw.polygon([(size // 2, pad), (pad + 2, size // 2 + pad), (size - pad - 2, size // 2 + pad)],
                 fill=COLOR_ACCENT)
    return img
