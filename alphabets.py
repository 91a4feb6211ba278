# alphabets.py

"""
Catálogo de alfabetos da roda ("alphabet wheel").

Cada alfabeto é uma sequência ORDENADA de letras únicas: a posição de cada
letra define o seu ângulo na roda. Também guarda um rótulo legível e uma
frase de exemplo (usada pelo orbitals.py quando nenhuma palavra é informada).

Um Alphabet se comporta como uma sequência de strings, então pode ser passado
direto para angles.angle_of() e glyph.build_glyph().
"""

import unicodedata
from dataclasses import dataclass
from typing import Dict, Iterator, Tuple

from angles import normalize


@dataclass(frozen=True)
class Alphabet:
    key: str
    label: str
    letters: Tuple[str, ...]
    sample: str = ""

    def __len__(self) -> int:
        return len(self.letters)

    def __iter__(self) -> Iterator[str]:
        return iter(self.letters)

    def __getitem__(self, idx):
        return self.letters[idx]

    @classmethod
    def from_string(cls, text: str, key: str = "custom", label: str = "Custom") -> "Alphabet":
        """
        Monta um alfabeto ad hoc: cada caractere não-branco de `text` vira uma letra.
        O texto passa antes por NFC: "A" + U+0308 vira "Ä" (uma letra só).
        Letras repetidas (ignorando maiúsc./minúsc.) ou texto vazio → ValueError.
        """
        text = unicodedata.normalize("NFC", text)
        letters = tuple(ch for ch in text if not ch.isspace())
        if not letters:
            raise ValueError("Alfabeto vazio: informe ao menos uma letra.")
        seen = set()
        for ch in letters:
            folded = normalize(ch)
            if folded in seen:
                raise ValueError(f"Letra repetida no alfabeto: '{ch}'")
            seen.add(folded)
        return cls(key=key, label=label, letters=letters)


# --- CATÁLOGO ---
ALPHABETS: Dict[str, Alphabet] = {
    a.key: a
    for a in (
        Alphabet("english", "English",
                 tuple("ABCDEFGHIJKLMNOPQRSTUVWXYZ"),
                 "HELLO SUN EARTH LOVE"),
        Alphabet("german", "Deutsch",
                 tuple("ABCDEFGHIJKLMNOPQRSTUVWXYZÄÖÜ"),
                 "HALLO SONNE ERDE LIEBE"),
        Alphabet("greek", "Ελληνικά",
                 tuple("ΑΒΓΔΕΖΗΘΙΚΛΜΝΞΟΠΡΣΤΥΦΧΨΩ"),
                 "ΓΕΙΑ ΗΛΙΟΣ ΓΗ ΑΓΑΠΗ"),
        Alphabet("russian", "Русский",
                 tuple("АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ"),
                 "ПРИВЕТ СОЛНЦЕ ЗЕМЛЯ ЛЮБОВЬ"),
    )
}

DEFAULT_ALPHABET = "english"


def get_alphabet(key: str) -> Alphabet:
    try:
        return ALPHABETS[key]
    except KeyError:
        known = ", ".join(sorted(ALPHABETS))
        raise KeyError(f"Alfabeto desconhecido '{key}' (disponíveis: {known})") from None
