import pytest

from alphabets import get_alphabet
from glyph import GlyphConfig, build_glyph
from render import render_glyph, render_sheet, split_words, write_sheet

ENGLISH = get_alphabet("english")


class TestSplitWords:
    def test_whitespace(self) -> None:
        assert split_words("  HELLO   SUN\nLOVE ") == ["HELLO", "SUN", "LOVE"]

    def test_empty(self) -> None:
        assert split_words("   ") == []


class TestRenderGlyph:
    def test_elements(self) -> None:
        g = build_glyph("HELLO", ENGLISH, 80, 85)
        elems = render_glyph(g, ENGLISH, caption="HELLO")
        joined = "\n".join(elems)
        assert joined.count("<path") == 2
        # ponto inicial + um anel
        assert joined.count("<circle") == 2
        assert joined.count("<text") == 27
        assert f'd="{g.d}"' in joined

    def test_empty_glyph(self) -> None:
        g = build_glyph("123", ENGLISH, 80, 85)
        elems = render_glyph(g, ENGLISH, show_wheel=False)
        assert elems == []


class TestRenderSheet:
    def test_document(self) -> None:
        svg = render_sheet(["HELLO"], ENGLISH)
        assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg"')
        assert svg.rstrip().endswith("</svg>")
        assert build_glyph("HELLO", ENGLISH, 80, 85).d in svg

    def test_no_wheel_no_caption(self) -> None:
        svg = render_sheet(["LOVE"], ENGLISH, show_wheel=False, show_caption=False)
        assert "<text" not in svg
        assert svg.count("<path") == 2
        assert 'height="170.00"' in svg

    def test_grid_size(self) -> None:
        svg = render_sheet(["A", "B", "C", "D", "E"], ENGLISH, columns=4)
        assert 'width="680.00"' in svg
        assert 'height="376.00"' in svg
        assert 'translate(0.00,188.00)' in svg

    def test_caption_is_escaped(self) -> None:
        svg = render_sheet(["A&B<C>"], ENGLISH)
        assert "A&amp;B&lt;C&gt;" in svg
        assert "A&B" not in svg

    def test_empty_word_has_no_stroke(self) -> None:
        svg = render_sheet(["123"], ENGLISH)
        assert "<path" not in svg
        assert "<circle" not in svg

    def test_write_sheet(self, tmp_path) -> None:
        out = tmp_path / "sheet.svg"
        svg = write_sheet(str(out), ["SUN", "EARTH"], ENGLISH)
        assert out.read_text(encoding="utf-8") == svg
        assert svg.count("<g ") == 2

    def test_prebuilt_glyphs(self) -> None:
        g = build_glyph("LOVE", ENGLISH, 80, 85, GlyphConfig(lead_in=0))
        svg = render_sheet(["LOVE"], ENGLISH, glyphs=[g])
        assert g.d in svg
        assert build_glyph("LOVE", ENGLISH, 80, 85).d not in svg

    def test_prebuilt_glyphs_must_match_words(self) -> None:
        g = build_glyph("LOVE", ENGLISH, 80, 85)
        with pytest.raises(ValueError):
            render_sheet(["LOVE", "SUN"], ENGLISH, glyphs=[g])
