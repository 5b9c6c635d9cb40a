"""Share-card rendering for game recaps.

Cards are 1200x630 (the Open Graph image size) and come in two encodings:
PNG rasters drawn with Pillow, which is what social crawlers accept as
``og:image``, and SVG documents with all text XML-escaped.
"""

from __future__ import annotations

import textwrap
from html import escape
from io import BytesIO

from PIL import Image, ImageDraw, ImageFont

from .recap_generator import GameRecap

CARD_WIDTH = 1200
CARD_HEIGHT = 630
CARD_SIZE = (CARD_WIDTH, CARD_HEIGHT)
BACKGROUND_FROM = "#1e40af"
BACKGROUND_TO = "#3b82f6"
WIN_COLOR = "#16a34a"
LOSS_COLOR = "#dc2626"
BADGE_BOX = (380, 110, 540, 158)
LINE_HEIGHT = 1.2

_CARD_HEADER = f"""<svg xmlns="http://www.w3.org/2000/svg" width="{CARD_WIDTH}" height="{CARD_HEIGHT}" viewBox="0 0 {CARD_WIDTH} {CARD_HEIGHT}">
<defs><linearGradient id="bg" x1="0" y1="0" x2="1" y2="1"><stop offset="0%" stop-color="{BACKGROUND_FROM}"/><stop offset="100%" stop-color="{BACKGROUND_TO}"/></linearGradient></defs>
<rect width="100%" height="100%" fill="url(#bg)"/>
"""


def _wrap(text: str, width: int, max_lines: int) -> list[str]:
    return textwrap.wrap(text, width=width)[:max_lines]


def _badge(recap: GameRecap) -> tuple[str, str]:
    if recap.game.is_team_win:
        return "VICTORY", WIN_COLOR
    return "LOSS", LOSS_COLOR


# ──────────────────────────────────────────────────────────────────────────────
# SVG
# ──────────────────────────────────────────────────────────────────────────────


def _text_lines(
    text: str,
    *,
    y: int,
    size: int,
    width: int,
    weight: str = "normal",
    opacity: float = 1.0,
    max_lines: int = 3,
) -> str:
    step = int(size * LINE_HEIGHT)
    return "".join(
        f'<text x="{CARD_WIDTH // 2}" y="{y + i * step}" font-family="Helvetica, Arial, sans-serif" '
        f'font-size="{size}" font-weight="{weight}" fill="white" fill-opacity="{opacity}" '
        f'text-anchor="middle">{escape(line)}</text>\n'
        for i, line in enumerate(_wrap(text, width, max_lines))
    )


def render_recap_card(recap: GameRecap, site_name: str) -> str:
    badge_label, badge_color = _badge(recap)
    x0, y0, x1, y1 = BADGE_BOX
    parts = [
        _CARD_HEADER,
        f'<rect x="{x0}" y="{y0}" width="{x1 - x0}" height="{y1 - y0}" rx="8" fill="{badge_color}"/>\n',
        f'<text x="460" y="143" font-family="Helvetica, Arial, sans-serif" font-size="24" '
        f'font-weight="bold" fill="white" text-anchor="middle">{badge_label}</text>\n',
        f'<text x="660" y="152" font-family="Helvetica, Arial, sans-serif" font-size="48" '
        f'font-weight="bold" fill="white" text-anchor="middle">{escape(recap.game.final_score)}</text>\n',
        _text_lines(recap.headline, y=260, size=36, width=45, weight="bold"),
        _text_lines(recap.summary, y=420, size=18, width=80, opacity=0.9),
        f'<text x="{CARD_WIDTH - 40}" y="{CARD_HEIGHT - 40}" font-family="Helvetica, Arial, sans-serif" '
        f'font-size="16" fill="white" fill-opacity="0.8" text-anchor="end">{escape(site_name)}</text>\n',
        "</svg>\n",
    ]
    return "".join(parts)


def render_placeholder_card(title: str, subtitle: str | None = None) -> str:
    """Card shown when the recap is missing or failed to build."""
    parts = [_CARD_HEADER, _text_lines(title, y=300, size=60, width=30, weight="bold", max_lines=1)]
    if subtitle:
        parts.append(_text_lines(subtitle, y=370, size=30, width=60, max_lines=1))
    parts.append("</svg>\n")
    return "".join(parts)


# ──────────────────────────────────────────────────────────────────────────────
# PNG
# ──────────────────────────────────────────────────────────────────────────────


def _white(opacity: float = 1.0) -> tuple[int, int, int, int]:
    return (255, 255, 255, round(255 * opacity))


def _canvas() -> tuple[Image.Image, ImageDraw.ImageDraw]:
    start = Image.new("RGB", CARD_SIZE, BACKGROUND_FROM)
    end = Image.new("RGB", CARD_SIZE, BACKGROUND_TO)
    mask = Image.linear_gradient("L").resize(CARD_SIZE)
    image = Image.composite(end, start, mask)
    # RGBA draw mode alpha-blends translucent text onto the RGB card
    return image, ImageDraw.Draw(image, "RGBA")


def _draw_text(
    draw: ImageDraw.ImageDraw,
    xy: tuple[int, int],
    text: str,
    *,
    size: int,
    bold: bool = False,
    opacity: float = 1.0,
    anchor: str = "ms",
) -> None:
    fill = _white(opacity)
    draw.text(
        xy,
        text,
        font=ImageFont.load_default(size=size),
        fill=fill,
        anchor=anchor,
        stroke_width=1 if bold else 0,
        stroke_fill=fill,
    )


def _draw_lines(
    draw: ImageDraw.ImageDraw,
    text: str,
    *,
    y: int,
    size: int,
    width: int,
    bold: bool = False,
    opacity: float = 1.0,
    max_lines: int = 3,
) -> None:
    step = int(size * LINE_HEIGHT)
    for i, line in enumerate(_wrap(text, width, max_lines)):
        _draw_text(draw, (CARD_WIDTH // 2, y + i * step), line, size=size, bold=bold, opacity=opacity)


def _encode(image: Image.Image) -> bytes:
    buffer = BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def render_recap_png(recap: GameRecap, site_name: str) -> bytes:
    """Raster version of :func:`render_recap_card`."""
    image, draw = _canvas()
    badge_label, badge_color = _badge(recap)
    draw.rounded_rectangle(BADGE_BOX, radius=8, fill=badge_color)
    _draw_text(draw, (460, 134), badge_label, size=24, bold=True, anchor="mm")
    _draw_text(draw, (660, 152), recap.game.final_score, size=48, bold=True)
    _draw_lines(draw, recap.headline, y=260, size=36, width=45, bold=True)
    _draw_lines(draw, recap.summary, y=420, size=18, width=80, opacity=0.9)
    _draw_text(
        draw, (CARD_WIDTH - 40, CARD_HEIGHT - 40), site_name, size=16, opacity=0.8, anchor="rs"
    )
    return _encode(image)


def render_placeholder_png(title: str, subtitle: str | None = None) -> bytes:
    image, draw = _canvas()
    _draw_lines(draw, title, y=300, size=60, width=30, bold=True, max_lines=1)
    if subtitle:
        _draw_lines(draw, subtitle, y=370, size=30, width=60, max_lines=1)
    return _encode(image)
