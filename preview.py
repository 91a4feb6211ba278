# preview.py

"""
Pré-visualização de um glifo com matplotlib: curva amostrada, rótulos da
roda, ponto inicial e anéis. O eixo Y é invertido para ficar igual ao SVG.
"""

import matplotlib.pyplot as plt
from matplotlib.patches import Circle

from angles import angle_at, polar_to_xy
from svg_utils import sample_path

# --- CONFIGURAÇÃO ---
POINTS_PER_SEGMENT = 24
FIGSIZE            = (4, 4)


def plot_glyph(glyph, alphabet, size=170, wheel_radius=80, title=None, ax=None, wheel_offset=0):
    """
    Desenha o glifo num Axes (cria a figura se `ax` não for informado) e o retorna.
    wheel_offset deve ser o mesmo do GlyphConfig usado no glifo.
    """
    if ax is None:
        plt.figure(figsize=FIGSIZE)
        ax = plt.gca()
    center = size / 2

    for idx, letter in enumerate(alphabet):
        p = polar_to_xy(angle_at(idx, len(alphabet), wheel_offset), wheel_radius, center)
        ax.text(p.real, p.imag, letter, ha="center", va="center", fontsize=7, color="#bbb")

    if not glyph.is_empty:
        pts = sample_path(glyph.path, POINTS_PER_SEGMENT) or [glyph.move]
        xs = [p.real for p in pts]
        ys = [p.imag for p in pts]
        ax.plot(xs, ys, color="black", linewidth=2)

        dot = glyph.start_dot
        ax.add_patch(Circle((dot.real, dot.imag), 3, color="black"))
        for p in glyph.rings:
            ax.add_patch(Circle((p.real, p.imag), 4.5, fill=False, edgecolor="black", linewidth=2))

    if title:
        ax.set_title(title)
    ax.set_xlim(0, size)
    ax.set_ylim(size, 0)
    ax.set_aspect("equal", adjustable="box")
    ax.axis("off")
    return ax


def show_glyph(glyph, alphabet, **kwargs):
    plot_glyph(glyph, alphabet, **kwargs)
    plt.tight_layout()
    plt.show()
