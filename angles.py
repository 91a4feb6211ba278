# angles.py

"""
Mapeamento letra → ângulo na roda do alfabeto, e ângulo → ponto (x, y).

As letras são distribuídas igualmente no círculo, começando às 12 horas e
seguindo no sentido horário (na tela):

    ângulo = π/2 − ((índice + offset) / N) · 2π

Os pontos usam a convenção do svgpathtools: complex(x, y), com o eixo Y
invertido (coordenadas de tela).
"""

import math
import unicodedata
from typing import Dict, List, Optional, Sequence

TWO_PI = math.pi * 2


def normalize(text: str) -> str:
    """Forma canônica usada em todas as comparações (NFC + casefold)."""
    return unicodedata.normalize("NFC", text).casefold()


def letter_index(alphabet: Sequence[str]) -> Dict[str, int]:
    """Tabela letra normalizada → posição no alfabeto."""
    return {normalize(letter): i for i, letter in enumerate(alphabet)}


def angle_at(index: int, size: int, offset: int = 0) -> float:
    if size <= 0:
        raise ValueError("Alfabeto vazio: o cálculo do ângulo exige N > 0.")
    return math.pi / 2 - ((index + offset) / size) * TWO_PI


def angle_of(letter: str, alphabet: Sequence[str], offset: int = 0) -> Optional[float]:
    """
    Retorna o ângulo (radianos) da letra na roda, ou None se ela não
    pertence ao alfabeto. None NÃO é erro: quem chama apenas pula a letra.
    """
    if not len(alphabet):
        raise ValueError("Alfabeto vazio: o cálculo do ângulo exige N > 0.")
    idx = letter_index(alphabet).get(normalize(letter))
    if idx is None:
        return None
    return angle_at(idx, len(alphabet), offset)


def polar_to_xy(angle: float, radius: float, center: float) -> complex:
    return complex(center + radius * math.cos(angle), center - radius * math.sin(angle))


def tokenize(word: str, alphabet: Sequence[str]) -> List[str]:
    """
    Quebra a palavra (já normalizada aqui) em letras do alfabeto, da esquerda
    para a direita, sempre escolhendo a entrada MAIS LONGA que casa na posição
    atual (permite letras de mais de um caractere). Caracteres que não casam
    com nada viram tokens de 1 caractere, que depois não terão ângulo.
    """
    keys = letter_index(alphabet)
    longest = max((len(k) for k in keys), default=1)
    text = normalize(word)

    tokens = []
    i = 0
    while i < len(text):
        for size in range(min(longest, len(text) - i), 0, -1):
            if text[i:i + size] in keys:
                break
        else:
            size = 1
        tokens.append(text[i:i + size])
        i += size
    return tokens
