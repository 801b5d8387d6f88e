"""
Share image rendering for quiz results.

Produces 1200x630 PNG cards (the Open Graph size social clients embed):
- Gradient background in the personality's colours
- Badge with the type's initial
- Title, tagline and the sharer's Farcaster id

Rendering is a pure function of its arguments; nothing is read from or
written to the store.
"""
import io
import logging
import os
import textwrap
from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from app.core.personality_map import PERSONALITY_TYPES

logger = logging.getLogger("app.share_image")

CANVAS_WIDTH = 1200
CANVAS_HEIGHT = 630

WHITE = (255, 255, 255)

# Used when the personality is missing or unknown
GENERIC_TITLE = "Web3 Builder"
GENERIC_TAGLINE = "Took the Web3 Personality Quiz!"
GENERIC_GRADIENT = ("#8b5cf6", "#3b82f6")

PROFILE_GRADIENT = ("#4b0082", "#8a2be2")

FONT_PATHS = {
    True: [
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
        "/usr/share/fonts/dejavu/DejaVuSans-Bold.ttf",
        "/Library/Fonts/Arial Bold.ttf",
    ],
    False: [
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
        "/usr/share/fonts/dejavu/DejaVuSans.ttf",
        "/Library/Fonts/Arial.ttf",
    ],
}


def hex_to_rgb(value: str) -> Tuple[int, int, int]:
    value = value.lstrip("#")
    return tuple(int(value[i:i + 2], 16) for i in (0, 2, 4))


def create_gradient(width, height, top_color, bottom_color):
    """Create a vertical gradient image."""
    img = Image.new('RGB', (width, height), top_color)
    draw = ImageDraw.Draw(img)

    for y in range(height):
        ratio = y / height
        r = int(top_color[0] + (bottom_color[0] - top_color[0]) * ratio)
        g = int(top_color[1] + (bottom_color[1] - top_color[1]) * ratio)
        b = int(top_color[2] + (bottom_color[2] - top_color[2]) * ratio)
        draw.line([(0, y), (width, y)], fill=(r, g, b))

    return img


def load_font(size, bold=False):
    """Load a font, falling back to Pillow's bundled one."""
    for path in FONT_PATHS[bold]:
        if os.path.exists(path):
            try:
                return ImageFont.truetype(path, size)
            except OSError:
                continue
    return ImageFont.load_default(size=size)


def _faded(opacity: float):
    return WHITE + (int(255 * opacity),)


def _draw_centered(draw, y, text, font, fill):
    """Draw ``text`` horizontally centred at ``y``; return the line height."""
    bbox = draw.textbbox((0, 0), text, font=font)
    width = bbox[2] - bbox[0]
    draw.text(((CANVAS_WIDTH - width) // 2, y), text, font=font, fill=fill)
    return bbox[3] - bbox[1]


def _to_png(canvas: Image.Image) -> bytes:
    buf = io.BytesIO()
    canvas.convert("RGB").save(buf, format="PNG")
    return buf.getvalue()


def render_personality_card(fid: str, personality: Optional[str] = None) -> bytes:
    """Render the result card for ``fid``; unknown types get the generic card."""
    info = PERSONALITY_TYPES.get(personality or "")
    if info is not None:
        title, tagline, gradient = info.title, info.tagline, info.gradient
    else:
        title, tagline, gradient = GENERIC_TITLE, GENERIC_TAGLINE, GENERIC_GRADIENT

    canvas = create_gradient(
        CANVAS_WIDTH, CANVAS_HEIGHT, hex_to_rgb(gradient[0]), hex_to_rgb(gradient[1])
    ).convert("RGBA")
    overlay = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
    draw = ImageDraw.Draw(overlay)

    y = 40
    y += _draw_centered(draw, y, "WEB3 PERSONALITY QUIZ", load_font(28, bold=True), _faded(0.9)) + 20

    badge = 150
    left = (CANVAS_WIDTH - badge) // 2
    draw.ellipse([(left, y), (left + badge, y + badge)], fill=_faded(0.2))
    initial = (personality or "?")[0].upper()
    initial_font = load_font(80, bold=True)
    bbox = draw.textbbox((0, 0), initial, font=initial_font)
    draw.text(
        (left + (badge - (bbox[2] - bbox[0])) // 2 - bbox[0], y + (badge - (bbox[3] - bbox[1])) // 2 - bbox[1]),
        initial,
        font=initial_font,
        fill=WHITE,
    )
    y += badge + 30

    y += _draw_centered(draw, y, title, load_font(60, bold=True), WHITE) + 20
    tagline_font = load_font(30)
    for line in textwrap.wrap(tagline, width=60):
        y += _draw_centered(draw, y, line, tagline_font, _faded(0.8)) + 8
    _draw_centered(draw, CANVAS_HEIGHT - 60, f"Farcaster #{fid}", load_font(24), _faded(0.7))

    canvas.alpha_composite(overlay)
    logger.debug(f"Rendered personality card fid={fid} personality={personality}")
    return _to_png(canvas)


def render_profile_card(fid: str) -> bytes:
    """Render the plain profile card shared from the mini-app home screen."""
    canvas = create_gradient(
        CANVAS_WIDTH, CANVAS_HEIGHT, hex_to_rgb(PROFILE_GRADIENT[0]), hex_to_rgb(PROFILE_GRADIENT[1])
    )
    draw = ImageDraw.Draw(canvas)

    y = 190
    y += _draw_centered(draw, y, "My Farcaster Profile", load_font(60, bold=True), WHITE) + 20
    y += _draw_centered(draw, y, f"Farcaster ID: {fid}", load_font(40), WHITE) + 40
    _draw_centered(draw, y, "View my profile on MiniApp", load_font(24), WHITE)

    return _to_png(canvas)
