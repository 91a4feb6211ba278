#!/usr/bin/env python3
"""
Orbitals: transforma palavras em glifos que orbitam a roda do alfabeto.

Gera uma folha SVG com um glifo por palavra (e, opcionalmente, o JSON com a
descrição de cada glifo e uma pré-visualização com matplotlib).

Exemplos:
    python orbitals.py HELLO SUN EARTH LOVE
    python orbitals.py ANNA --out anna.svg --no-wheel
    python orbitals.py --alphabet greek
    python orbitals.py ABBA --letters "ABCD" --json
    python orbitals.py --list
"""

import argparse
import json
import sys
from typing import List, Optional

from alphabets import ALPHABETS, DEFAULT_ALPHABET, Alphabet, get_alphabet
from glyph import GlyphConfig, build_glyph
from render import CELL_SIZE, COLUMNS, WHEEL_RADIUS, split_words, write_sheet

# --- CONFIGURAÇÃO ---
OUTPUT_SVG = "orbitals.svg"     # Arquivo SVG gerado por padrão


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="orbitals.py",
        description="Gera glifos Orbitals (SVG) a partir de palavras.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    p.add_argument("words", nargs="*",
                   help="Palavras (sem palavras → frase de exemplo do alfabeto).")
    src = p.add_mutually_exclusive_group()
    src.add_argument("--alphabet", default=DEFAULT_ALPHABET,
                     help=f"Alfabeto do catálogo (padrão: {DEFAULT_ALPHABET}).")
    src.add_argument("--letters", default=None,
                     help="Alfabeto ad hoc: cada caractere é uma letra, na ordem da roda.")
    p.add_argument("--out", default=OUTPUT_SVG, help=f"SVG de saída (padrão: {OUTPUT_SVG}).")
    p.add_argument("--size", type=float, default=CELL_SIZE, help="Lado de cada célula (px).")
    p.add_argument("--radius", type=float, default=WHEEL_RADIUS, help="Raio da roda (px).")
    p.add_argument("--columns", type=int, default=COLUMNS, help="Células por linha.")
    p.add_argument("--no-wheel", action="store_true", help="Não desenha a roda do alfabeto.")
    p.add_argument("--no-caption", action="store_true", help="Não escreve a legenda.")
    p.add_argument("--json", action="store_true", help="Imprime a descrição dos glifos em JSON.")
    p.add_argument("--preview", action="store_true", help="Mostra o primeiro glifo (matplotlib).")
    p.add_argument("--list", action="store_true", help="Lista os alfabetos disponíveis e sai.")
    return p


def list_alphabets() -> None:
    for key in sorted(ALPHABETS):
        a = ALPHABETS[key]
        print(f"  {key:10s} {a.label:10s} {len(a):3d} letras   ex.: {a.sample}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_argparser().parse_args(argv)

    if args.list:
        list_alphabets()
        return 0

    try:
        if args.letters is not None:
            alphabet = Alphabet.from_string(args.letters)
        else:
            alphabet = get_alphabet(args.alphabet)
        if args.size <= 0 or args.radius <= 0:
            raise ValueError("--size e --radius devem ser positivos.")

        words = split_words(" ".join(args.words)) or split_words(alphabet.sample)
        if not words:
            raise ValueError("Nenhuma palavra informada e o alfabeto não tem frase de exemplo.")

        config = GlyphConfig()
        glyphs = [build_glyph(w, alphabet, args.radius, args.size / 2, config) for w in words]
        for word, g in zip(words, glyphs):
            if g.is_empty:
                print(f"[WARN] Nenhuma letra de '{word}' existe no alfabeto '{alphabet.key}', glifo vazio.")

        write_sheet(args.out, words, alphabet,
                    size=args.size, wheel_radius=args.radius, columns=args.columns,
                    show_wheel=not args.no_wheel, show_caption=not args.no_caption,
                    config=config, glyphs=glyphs)
    except (KeyError, ValueError) as e:
        # KeyError formata a mensagem com aspas extras
        msg = e.args[0] if e.args else str(e)
        print(f"Erro: {msg}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"Erro de arquivo: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps([dict(word=w, **g.to_dict()) for w, g in zip(words, glyphs)],
                         indent=2, ensure_ascii=False))
    else:
        print(f"✅ Gerado {args.out} ({len(words)} glifo(s), alfabeto '{alphabet.key}')")

    if args.preview:
        # import tardio: matplotlib só é carregado quando a janela é pedida
        from preview import show_glyph
        show_glyph(glyphs[0], alphabet, size=args.size, wheel_radius=args.radius,
                   title=words[0], wheel_offset=config.wheel_offset)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
