"""
Terminal front end for EasyWine.

  easywine --base-url http://127.0.0.1:8076
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, List, Optional

from easywine.client.controller import (
    EasyWineApp,
    PairingError,
    profile_tags,
    render_dots,
    visible_characteristics,
)
from easywine.client.gateway import GatewayClient
from easywine.client.session import FileNameStore
from easywine.features.pairing.domain.categories import QUICK_FILTERS, find_category
from easywine.shared.logging.logger import setup_logging

HELP = """
Comandos:
  foto <caminho>     anexar foto do prato
  sem-foto           remover a foto
  prato <texto>      o que vamos comer hoje?
  cat <id>           escolher/limpar categoria ({ids})
  harmonizar         pedir a harmonização
  limpar             limpar o formulário
  sair               trocar de usuário
  fim                fechar
""".format(ids=", ".join(c.id for c in QUICK_FILTERS))


def _ask_yes_no(question: str) -> bool:
    return input(f"{question} [s/N] ").strip().lower() in ("s", "sim", "y", "yes")


def _render_form(app: EasyWineApp, out: Callable[[str], None]) -> None:
    out("")
    out(f"EasyWine · Olá, {app.user_name}")
    out(f"  Foto: {'anexada' if app.image else '-'}")
    out(f"  Prato: {app.ingredients or '-'}")
    cats: List[str] = []
    for c in QUICK_FILTERS:
        mark = "[x]" if c.id == app.selected_filter else "[ ]"
        cats.append(f"{mark} {c.emoji} {c.label} ({c.id})")
    out("  Categorias: " + "  ".join(cats))


def _render_result(app: EasyWineApp, out: Callable[[str], None]) -> None:
    p = app.pairing or {}
    out("")
    out(f"Para você, {app.user_name}")
    out(f"== {p.get('estilo', '')} ==")
    out("")
    out(f"❝ O Veredito: {p.get('explicacao', '')}")
    out(f"Temperatura: {p.get('temperatura', '')}")
    out(f"Origem: {', '.join(str(x) for x in (p.get('paises') or []))}")
    out("Perfil do Vinho: " + " · ".join(profile_tags(p)))
    for attr, level in visible_characteristics(p):
        out(f"  {attr.capitalize():<8} {render_dots(level)}")


def _handle(app: EasyWineApp, line: str, out: Callable[[str], None]) -> bool:
    cmd, _, arg = line.strip().partition(" ")
    arg = arg.strip()
    if cmd == "fim":
        return False
    if cmd == "foto":
        try:
            app.attach_image(Path(arg))
        except OSError as e:
            out(f"Não consegui ler a foto: {e}")
    elif cmd == "sem-foto":
        app.clear_image()
    elif cmd == "prato":
        app.set_ingredients(arg)
    elif cmd == "cat":
        if find_category(arg) is None:
            out(f"Categoria desconhecida: {arg}")
        else:
            app.toggle_category(arg)
    elif cmd == "harmonizar":
        out("CONSULTANDO...")
        try:
            app.analyze()
        except PairingError as e:
            out(str(e))
            return True
        _render_result(app, out)
        input("\n[Enter] Nova Análise ")
        app.reset()
    elif cmd == "limpar":
        app.reset()
    elif cmd == "sair":
        app.logout(_ask_yes_no)
    else:
        out(HELP)
    return True


def run(app: EasyWineApp, out: Callable[[str], None] = print) -> None:
    while True:
        if not app.is_name_set:
            out("\nEasyWine · Seu sommelier pessoal inteligente.")
            if not app.submit_name(input("Como devo te chamar? ")):
                out("O nome precisa ter pelo menos 2 letras.")
            continue
        _render_form(app, out)
        if not _handle(app, input("> "), out):
            return


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="EasyWine terminal sommelier")
    parser.add_argument("--base-url", default="http://127.0.0.1:8076", help="Gateway base URL")
    parser.add_argument("--session-file", default=None, help="Where the display name is kept")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    store = FileNameStore(Path(args.session_file) if args.session_file else None)
    with GatewayClient(args.base_url) as gateway:
        try:
            run(EasyWineApp(store, gateway))
        except (EOFError, KeyboardInterrupt):
            print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
