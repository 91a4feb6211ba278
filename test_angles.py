import math

import pytest

from alphabets import get_alphabet
from angles import angle_at, angle_of, normalize, polar_to_xy, tokenize

ENGLISH = get_alphabet("english")


class TestAngleOf:
    def test_first_letter_at_twelve_oclock(self) -> None:
        assert angle_of("A", ENGLISH) == pytest.approx(math.pi / 2)

    def test_case_insensitive(self) -> None:
        assert angle_of("q", ENGLISH) == angle_of("Q", ENGLISH)

    def test_unknown_letter_is_none(self) -> None:
        assert angle_of("?", ENGLISH) is None
        assert angle_of("Ж", ENGLISH) is None

    def test_even_spacing(self) -> None:
        for alphabet in (ENGLISH, get_alphabet("greek"), get_alphabet("russian")):
            n = len(alphabet)
            angles = [angle_of(letter, alphabet) for letter in alphabet]
            assert len(set(angles)) == n
            for a, b in zip(angles, angles[1:]):
                # sentido horário na tela = ângulo decrescente
                assert a - b == pytest.approx(2 * math.pi / n)

    def test_offset_shifts_start(self) -> None:
        assert angle_of("A", ENGLISH, offset=1) == pytest.approx(angle_of("B", ENGLISH))

    def test_quarter_turn(self) -> None:
        assert angle_of("N", ENGLISH) == pytest.approx(-math.pi / 2)

    def test_greek_final_sigma(self) -> None:
        greek = get_alphabet("greek")
        assert angle_of("ς", greek) == angle_of("Σ", greek)

    def test_decomposed_umlaut(self) -> None:
        german = get_alphabet("german")
        assert angle_of("A\u0308", german) == pytest.approx(angle_at(26, 29))

    def test_empty_alphabet(self) -> None:
        with pytest.raises(ValueError):
            angle_of("A", [])
        with pytest.raises(ValueError):
            angle_at(0, 0)


class TestPolarToXY:
    def test_top_of_wheel(self) -> None:
        p = polar_to_xy(math.pi / 2, 10, 50)
        assert p.real == pytest.approx(50)
        assert p.imag == pytest.approx(40)

    def test_right_of_wheel(self) -> None:
        assert polar_to_xy(0, 10, 50) == pytest.approx(60 + 50j)

    def test_deterministic(self) -> None:
        assert polar_to_xy(1.234, 77.7, 3.5) == polar_to_xy(1.234, 77.7, 3.5)

    def test_zero_radius_is_center(self) -> None:
        assert polar_to_xy(2.0, 0, 85) == pytest.approx(85 + 85j)


class TestTokenize:
    def test_single_letters(self) -> None:
        assert tokenize("Hello!", ENGLISH) == ["h", "e", "l", "l", "o", "!"]

    def test_longest_match(self) -> None:
        alphabet = ["A", "CH", "C", "H"]
        assert tokenize("chach", alphabet) == ["ch", "a", "ch"]
        assert tokenize("CAH", alphabet) == ["c", "a", "h"]

    def test_empty(self) -> None:
        assert tokenize("", ENGLISH) == []

    def test_normalize(self) -> None:
        assert normalize("ÄB") == "äb"
        assert normalize("A\u0308") == "\u00e4"
