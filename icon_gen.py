"""Generate the system-tray icon (64×64 PIL Image, in-memory)."""

from datetime import date

from PIL import Image, ImageDraw, ImageFont

ICON_SIZE = 64
_HEADER_H = 16
_HEADER_COLOR = "#1E3A8A"


def _fit_font(draw: ImageDraw.ImageDraw, text: str, max_w: int, max_h: int):
    """Largest truetype font that fits the box, or PIL's default font."""
    font_size = 120
    while font_size > 10:
        try:
            font = ImageFont.truetype("DejaVuSans-Bold.ttf", font_size)
        except OSError:
            return ImageFont.load_default()
        bbox = draw.textbbox((0, 0), text, font=font)
        if bbox[2] - bbox[0] <= max_w and bbox[3] - bbox[1] <= max_h:
            return font
        font_size -= 1
    return font


def create_icon_image(today: date | None = None) -> Image.Image:
    """Return a 64×64 RGBA image: a calendar page with today's day number."""
    today = today or date.today()
    size = ICON_SIZE
    img = Image.new("RGBA", (size, size), "white")
    draw = ImageDraw.Draw(img)

    # Binding strip across the top, like a tear-off calendar
    draw.rectangle((0, 0, size - 1, _HEADER_H - 1), fill=_HEADER_COLOR)

    text = str(today.day)
    body_h = size - _HEADER_H
    font = _fit_font(draw, text, size - 4, body_h - 4)

    # Centre the visible pixels in the area below the strip
    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = _HEADER_H + (body_h - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="black", font=font)

    return img
