# glyph.py

"""
Construção do glifo "Orbitals": uma palavra vira um único traço contínuo.

Cada letra é um ponto na roda do alfabeto (angles.py); os pontos são ligados,
na ordem da palavra, por curvas quadráticas (svgpathtools.QuadraticBezier).

Regras:
  - letra fora do alfabeto → ignorada (sem ponto, sem erro);
  - letra igual à anterior (e a anterior tinha ângulo) → vira um "anel"
    (ring) em vez de um novo vértice;
  - palíndromo perfeito → raios ligeiramente separados nas duas metades e
    pontos de controle perpendiculares ao segmento (formato de folha);
  - demais palavras → ponto de controle puxado para o centro e depois para
    o próximo vértice (visual de órbita);
  - o primeiro vértice recua `lead_in` em direção ao centro; o ponto exato
    fica registrado em start_dot.

Tudo aqui é puro: mesma entrada → mesmo glifo, sem estado global.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from svgpathtools import Path, QuadraticBezier

from angles import angle_at, letter_index, normalize, polar_to_xy, tokenize
from svg_utils import format_point, get_global_bbox, path_d

# --- CONFIGURAÇÃO ---
WHEEL_OFFSET     = 0      # índice 0 (A) às 12 horas
LEAD_IN_PX       = 7      # recuo do traço em relação ao ponto inicial
RING_MARGIN_PX   = 15     # espaço entre os pontos do glifo e os rótulos da roda
PAL_SPLIT        = 1      # deslocamento radial das metades de um palíndromo
PAL_BOW          = 0.3    # abertura da "folha" (fração do raio base)
RADIAL_FACTOR    = 0.8    # quanto o controle é puxado para o centro
PULL_FACTOR      = 0.4    # quanto o controle é puxado para o próximo vértice
PRECISION        = 2      # casas decimais no atributo 'd'


@dataclass(frozen=True)
class GlyphConfig:
    wheel_offset: int = WHEEL_OFFSET
    lead_in: float = LEAD_IN_PX
    ring_margin: float = RING_MARGIN_PX
    palindrome_split: float = PAL_SPLIT
    palindrome_bow: float = PAL_BOW
    radial_factor: float = RADIAL_FACTOR
    pull_factor: float = PULL_FACTOR
    precision: int = PRECISION


@dataclass(frozen=True)
class Vertex:
    point: complex
    angle: float
    index: int      # posição da letra na palavra normalizada (antes de tirar os anéis)


@dataclass(frozen=True)
class Glyph:
    move: Optional[complex]
    path: Path = field(default_factory=Path)
    start_dot: Optional[complex] = None
    rings: Tuple[complex, ...] = ()
    vertices: Tuple[Vertex, ...] = ()
    letters: Tuple[str, ...] = ()
    palindrome: bool = False
    precision: int = PRECISION

    @property
    def is_empty(self) -> bool:
        return self.move is None

    @property
    def d(self) -> str:
        return path_d(self.move, self.path, self.precision)

    def commands(self) -> List[tuple]:
        """[("M", (x, y)), ("Q", (cx, cy), (x, y)), ...] com a precisão do glifo."""
        if self.move is None:
            return []
        r = lambda p: (round(p.real, self.precision), round(p.imag, self.precision))
        cmds: List[tuple] = [("M", r(self.move))]
        for seg in self.path:
            cmds.append(("Q", r(seg.control), r(seg.end)))
        return cmds

    def to_dict(self) -> dict:
        r = lambda p: [round(p.real, self.precision), round(p.imag, self.precision)]
        return {
            "letters": list(self.letters),
            "palindrome": self.palindrome,
            "d": self.d,
            "start_dot": r(self.start_dot) if self.start_dot is not None else None,
            "rings": [r(p) for p in self.rings],
            "bbox": [round(v, self.precision) for v in get_global_bbox(self.path)] if len(self.path) else None,
        }

    def __str__(self) -> str:
        dot = format_point(self.start_dot, self.precision) if self.start_dot is not None else "-"
        return f"<Glyph {''.join(self.letters)!r} dot={dot} rings={len(self.rings)} d={self.d!r}>"


def is_perfect_palindrome(word: str, alphabet: Optional[Sequence[str]] = None) -> bool:
    """
    Palavra normalizada não vazia que se lê igual nos dois sentidos.
    Com `alphabet`, compara letra a letra (tokens), o que importa quando o
    alfabeto tem letras de mais de um caractere ("CH").
    """
    if alphabet is not None:
        letters = tokenize(word, alphabet)
        return bool(letters) and letters == letters[::-1]
    s = normalize(word)
    return bool(s) and s == s[::-1]


def lead_in_point(p: complex, center: complex, distance: float) -> complex:
    """Move `p` uma distância fixa em direção ao centro (vetor nulo → sem deslocamento)."""
    v = center - p
    length = abs(v) or 1
    return p + v / length * distance


def leaf_control(a: complex, b: complex, bow: float, sign: int) -> complex:
    """Controle perpendicular ao segmento A→B, a partir do ponto médio."""
    seg = b - a
    length = abs(seg) or 1
    perp = complex(seg.imag / length, -seg.real / length)
    return (a + b) / 2 + perp * bow * sign


def orbit_control(a: complex, b: complex, center: complex,
                  radial_factor: float, pull_factor: float) -> complex:
    """Ponto médio puxado para o centro e, em seguida, para B."""
    mid = (a + b) / 2
    ctrl1 = mid + (center - mid) * radial_factor
    return ctrl1 + (b - ctrl1) * pull_factor


def build_glyph(word: str, alphabet: Sequence[str], wheel_radius: float, center: float,
                config: Optional[GlyphConfig] = None) -> Glyph:
    """
    Monta o glifo de `word` na roda de `alphabet`.

    wheel_radius: raio onde ficam os rótulos das letras
    center: coordenada do centro do canvas (normalmente size / 2), usada para x e y

    Nunca falha para alfabeto não vazio e números finitos; alfabeto vazio → ValueError.
    """
    cfg = config or GlyphConfig()
    word = word or ""
    size = len(alphabet)
    if size <= 0:
        raise ValueError("Alfabeto vazio: o cálculo do ângulo exige N > 0.")

    letters = tokenize(word, alphabet)
    if not letters:
        return Glyph(move=None, precision=cfg.precision)

    index = letter_index(alphabet)
    c = complex(center, center)
    base_r = wheel_radius - cfg.ring_margin
    pal = letters == letters[::-1]
    half = (len(letters) - 1) // 2

    vertices: List[Vertex] = []
    rings: List[complex] = []
    for i, ch in enumerate(letters):
        pos = index.get(ch)
        if pos is None:
            continue
        ang = angle_at(pos, size, cfg.wheel_offset)

        r = base_r
        if pal:
            r += cfg.palindrome_split if i <= half else -cfg.palindrome_split
        p = polar_to_xy(ang, r, center)

        if i > 0 and ch == letters[i - 1]:
            rings.append(p)
        else:
            vertices.append(Vertex(point=p, angle=ang, index=i))

    stored = tuple(alphabet[index[ch]] if ch in index else ch for ch in letters)
    if not vertices:
        return Glyph(move=None, letters=stored, palindrome=pal, precision=cfg.precision)

    dot = vertices[0].point
    points = [lead_in_point(dot, c, cfg.lead_in)] + [v.point for v in vertices[1:]]

    segments = []
    for k in range(1, len(points)):
        a, b = points[k - 1], points[k]
        if pal:
            sign = -1 if vertices[k - 1].index <= half else 1
            ctrl = leaf_control(a, b, base_r * cfg.palindrome_bow, sign)
        else:
            ctrl = orbit_control(a, b, c, cfg.radial_factor, cfg.pull_factor)
        segments.append(QuadraticBezier(a, ctrl, b))

    return Glyph(
        move=points[0],
        path=Path(*segments),
        start_dot=dot,
        rings=tuple(rings),
        vertices=tuple(vertices),
        letters=stored,
        palindrome=pal,
        precision=cfg.precision,
    )
