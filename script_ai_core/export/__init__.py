from __future__ import annotations

import re
from pathlib import Path
from typing import Optional, Sequence

from ..domain_models import ScriptScene
from ..renderer import render_script_html
from .pdf_weasyprint import PdfWeasyprintExporter

DEFAULT_EXPORT_STEM = "Naskah_Video"


def export_filename(user_name: Optional[str] = None) -> str:
    """Nombre del PDF descargable: `Naskah_Video_<nombre>.pdf` o `Naskah_Video.pdf`."""
    slug = re.sub(r"[^A-Za-z0-9_\-]+", "_", (user_name or "").strip()).strip("_")
    if not slug:
        return f"{DEFAULT_EXPORT_STEM}.pdf"
    return f"{DEFAULT_EXPORT_STEM}_{slug}.pdf"


def export_script_pdf(script: Sequence[ScriptScene], user_name: Optional[str] = None) -> bytes:
    exporter = PdfWeasyprintExporter()
    return exporter.export_to_bytes(render_script_html(script, user_name))


def write_script_pdf(
    script: Sequence[ScriptScene],
    output_dir: Path,
    user_name: Optional[str] = None,
) -> Path:
    exporter = PdfWeasyprintExporter()
    out_pdf = Path(output_dir) / export_filename(user_name)
    return exporter.export_from_html_string(render_script_html(script, user_name), out_pdf)
