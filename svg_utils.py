# svg_utils.py

from typing import List, Optional, Tuple

from svgpathtools import Path


def format_point(p: complex, precision: int = 2) -> str:
    """complex(x, y) → "x y" com precisão fixa (saída reprodutível)."""
    return f"{p.real:.{precision}f} {p.imag:.{precision}f}"


def path_d(move: Optional[complex], path: Path, precision: int = 2) -> str:
    """
    Monta o atributo 'd' do glifo:
      - um "M x y" para o primeiro ponto (move)
      - um "Q cx cy x y" por segmento QuadraticBezier de `path`
    Sem ponto inicial → string vazia (glifo vazio).
    """
    if move is None:
        return ""
    parts = [f"M {format_point(move, precision)}"]
    for seg in path:
        parts.append(f"Q {format_point(seg.control, precision)} {format_point(seg.end, precision)}")
    return " ".join(parts)


def get_global_bbox(path: Path) -> Tuple[float, float, float, float]:
    """
    Retorna (x_min, x_max, y_min, y_max) de um svgpathtools.Path,
    percorrendo todos os pontos de controle (bpoints) de cada segmento.
    """
    xs, ys = [], []
    for seg in path:
        for pt in seg.bpoints():
            xs.append(pt.real)
            ys.append(pt.imag)
    return min(xs), max(xs), min(ys), max(ys)


def sample_path(path: Path, points_per_segment: int = 24) -> List[complex]:
    """
    Amostra pontos ao longo do caminho, segmento por segmento.
    Usa seg.point(t) (e não path.point(T)) porque path.point divide pelo
    comprimento total, que é zero quando todos os segmentos são degenerados.
    """
    pts: List[complex] = []
    for k, seg in enumerate(path):
        # o primeiro ponto de cada segmento repete o último do anterior
        start = 0 if k == 0 else 1
        for i in range(start, points_per_segment + 1):
            pts.append(seg.point(i / points_per_segment))
    return pts
