# render.py

"""
Gera a folha SVG com um glifo por palavra, no mesmo visual do gerador web:

  - roda do alfabeto (rótulos cinza), opcional
  - traço do glifo (contorno externo translúcido + traço interno)
  - ponto inicial (círculo cheio) e anéis (círculos vazados)
  - legenda com a palavra, opcional

As palavras são dispostas em grade, `columns` células por linha.
"""

import math
import re
from typing import List, Optional, Sequence
from xml.sax.saxutils import escape

from angles import angle_at, polar_to_xy
from glyph import Glyph, GlyphConfig, build_glyph

# --- CONFIGURAÇÃO ---
CELL_SIZE       = 170       # lado de cada célula (px)
WHEEL_RADIUS    = 80        # raio onde ficam os rótulos das letras
COLUMNS         = 4         # células por linha
CAPTION_HEIGHT  = 18        # altura reservada para a legenda
LABEL_FONT_SIZE = 8
LABEL_COLOR     = "#bbb"
STROKE_OUT      = 0         # largura do contorno externo
STROKE_IN       = 2         # largura do traço principal
DOT_RADIUS      = 3
RING_RADIUS     = 4.5
RING_STROKE     = 2


def split_words(text: str) -> List[str]:
    """Quebra o texto em palavras por espaços em branco (sem vazias)."""
    return [w for w in re.split(r"\s+", text.strip()) if w]


def _num(v: float) -> str:
    return f"{v:.2f}"


def render_wheel(alphabet: Sequence[str], wheel_radius: float, center: float,
                 offset: int = 0) -> List[str]:
    elems = []
    for idx, letter in enumerate(alphabet):
        p = polar_to_xy(angle_at(idx, len(alphabet), offset), wheel_radius, center)
        elems.append(
            f'<text x="{_num(p.real)}" y="{_num(p.imag)}" font-size="{LABEL_FONT_SIZE}" '
            f'text-anchor="middle" dominant-baseline="middle" fill="{LABEL_COLOR}">'
            f"{escape(letter)}</text>"
        )
    return elems


def render_glyph(glyph: Glyph, alphabet: Sequence[str], size: float = CELL_SIZE,
                 wheel_radius: float = WHEEL_RADIUS, caption: Optional[str] = None,
                 show_wheel: bool = True, wheel_offset: int = 0) -> List[str]:
    """
    Retorna os elementos SVG (strings) de UMA célula, em coordenadas locais
    (0..size). Glifo vazio → só roda e legenda.
    """
    center = size / 2
    elems = []
    if show_wheel:
        elems.extend(render_wheel(alphabet, wheel_radius, center, wheel_offset))

    if not glyph.is_empty:
        d = glyph.d
        elems.append(
            f'<path d="{d}" stroke="black" stroke-width="{STROKE_OUT}" stroke-opacity="0.25" '
            f'fill="none" stroke-linecap="round" stroke-linejoin="round"/>'
        )
        elems.append(
            f'<path d="{d}" stroke="black" stroke-width="{STROKE_IN}" '
            f'fill="none" stroke-linecap="round" stroke-linejoin="round"/>'
        )
        dot = glyph.start_dot
        elems.append(f'<circle cx="{_num(dot.real)}" cy="{_num(dot.imag)}" r="{DOT_RADIUS}" fill="black"/>')
        for p in glyph.rings:
            elems.append(
                f'<circle cx="{_num(p.real)}" cy="{_num(p.imag)}" r="{RING_RADIUS}" '
                f'fill="none" stroke="black" stroke-width="{RING_STROKE}"/>'
            )

    if caption is not None:
        elems.append(
            f'<text x="{_num(center)}" y="{_num(size + CAPTION_HEIGHT / 2)}" font-size="12" '
            f'text-anchor="middle" dominant-baseline="middle" fill="black">{escape(caption)}</text>'
        )
    return elems


def render_sheet(words: Sequence[str], alphabet: Sequence[str], size: float = CELL_SIZE,
                 wheel_radius: float = WHEEL_RADIUS, columns: int = COLUMNS,
                 show_wheel: bool = True, show_caption: bool = True,
                 config: Optional[GlyphConfig] = None,
                 glyphs: Optional[Sequence[Glyph]] = None) -> str:
    """
    Documento SVG completo, uma célula por palavra.
    `glyphs`, se informado, traz os glifos já montados (um por palavra, mesma ordem).
    """
    cfg = config or GlyphConfig()
    if glyphs is not None and len(glyphs) != len(words):
        raise ValueError("glyphs e words precisam ter o mesmo tamanho.")
    columns = max(1, columns)
    cell_h = size + (CAPTION_HEIGHT if show_caption else 0)
    cols = min(columns, len(words)) or 1
    rows = math.ceil(len(words) / columns) or 1
    width, height = cols * size, rows * cell_h

    body = []
    for n, word in enumerate(words):
        if glyphs is not None:
            glyph = glyphs[n]
        else:
            glyph = build_glyph(word, alphabet, wheel_radius, size / 2, cfg)
        x, y = (n % columns) * size, (n // columns) * cell_h
        cell = render_glyph(glyph, alphabet, size, wheel_radius,
                            caption=word if show_caption else None,
                            show_wheel=show_wheel, wheel_offset=cfg.wheel_offset)
        body.append(f'<g transform="translate({_num(x)},{_num(y)})">')
        body.extend("  " + e for e in cell)
        body.append("</g>")

    header = (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{_num(width)}" height="{_num(height)}" '
        f'viewBox="0 0 {_num(width)} {_num(height)}">'
    )
    background = f'<rect width="{_num(width)}" height="{_num(height)}" fill="white"/>'
    return "\n".join([header, background] + body + ["</svg>"]) + "\n"


def write_sheet(out_path: str, words: Sequence[str], alphabet: Sequence[str], **kwargs) -> str:
    svg = render_sheet(words, alphabet, **kwargs)
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(svg)
    return svg
