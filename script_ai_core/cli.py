"""
script_ai_core.cli
==================

Punto de entrada de consola para correr el flujo end-to-end del core:

1) Leer un documento local (PDF / DOC / DOCX) y validarlo.
2) Pedir al modelo el guion estructurado por escenas.
3) Persistir outputs en `--output-dir` (default: settings.output_dir):
   - `script.json`  : escenas con las claves del contrato
   - `script.md`    : guion legible
   - `Naskah_Video_<nombre>.pdf` : export paginado (WeasyPrint)
4) Mostrar la duración estimada del video.

Uso:
    script-ai-core generate materi.pdf --name "Budi Santoso"
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import get_settings
from .domain_models import DocumentBlob
from .errors import DocumentValidationError, GenerationInProgressError
from .export import write_script_pdf
from .renderer import render_script_markdown
from .session import ScriptSession


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="script-ai-core",
        description="Genera un guion de video por escenas a partir de un documento.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generar el guion de un documento")
    gen.add_argument("document", type=Path, help="Ruta al PDF / DOC / DOCX")
    gen.add_argument("--name", default="", help="Nombre del docente (saludo de apertura)")
    gen.add_argument("--output-dir", type=Path, default=None, help="Directorio de salida")
    gen.add_argument("--no-pdf", action="store_true", help="No generar el PDF")
    gen.add_argument("-v", "--verbose", action="store_true", help="Logging en nivel DEBUG")
    return parser


def _generate(args: argparse.Namespace) -> int:
    settings = get_settings()
    session = ScriptSession()
    session.set_name(args.name)

    if not args.document.exists():
        print(f"❌ No se encontró el documento: {args.document}")
        return 1

    try:
        session.select_document(DocumentBlob.from_path(args.document))
    except DocumentValidationError as e:
        print(f"❌ {e.message}")
        return 1

    print(f"🧠 Generando guion para {args.document.name}...")
    try:
        state = session.generate()
    except GenerationInProgressError as e:
        print(f"⚠️ {e.message}")
        return 1

    if state.error:
        print(f"❌ {state.error}")
        if session.can_retry:
            print("   Tip: esperá unos minutos y volvé a correr el mismo comando.")
        return 1

    script = state.script or ()
    output_dir = args.output_dir or Path(settings.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    json_path = output_dir / "script.json"
    md_path = output_dir / "script.md"

    json_path.write_text(
        json.dumps([s.to_wire() for s in script], ensure_ascii=False, indent=2),
        encoding="utf-8",
    )
    md_path.write_text(render_script_markdown(script, args.name or None), encoding="utf-8")

    print(f"✅ JSON generado en: {json_path.resolve()}")
    print(f"✅ Guion generado en: {md_path.resolve()}")
    print(f"⏱️ Duración estimada: {session.estimated_duration}")

    if not args.no_pdf:
        try:
            pdf_path = write_script_pdf(script, output_dir, args.name or None)
            print(f"📄 PDF generado en: {pdf_path.resolve()}")
        except (ImportError, RuntimeError) as e:
            print(f"⚠️ No se pudo generar el PDF. Motivo: {e}")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if args.command == "generate":
        return _generate(args)
    return 2


if __name__ == "__main__":
    sys.exit(main())
