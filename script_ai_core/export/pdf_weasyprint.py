"""
script_ai_core.export.pdf_weasyprint
====================================

Exportador HTML → PDF usando WeasyPrint.

El guion se renderiza a HTML (`renderer.render_script_html`) y WeasyPrint lo
pagina en A4 con el CSS base de este módulo:
  - Bloque de título al inicio del documento
  - Una sección por escena; el encabezado nunca queda solo al pie de página
  - Frases clave resaltadas como ítems separados

Requisitos
----------
- weasyprint instalado en el entorno: `pip install weasyprint`
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

# CSS base que se inyecta al documento HTML para una apariencia consistente
_BASE_CSS = """
@page {
    size: A4;
    margin: 2cm;
    @bottom-center {
        content: counter(page) " / " counter(pages);
        font-size: 9pt;
        color: #888;
    }
}

body {
    font-family: 'Helvetica Neue', Arial, sans-serif;
    font-size: 11pt;
    line-height: 1.6;
    color: #0e0e0e;
}

h1 { font-size: 22pt; font-weight: bold; margin: 0 0 0.4em; color: #312e81; }
h2 { font-size: 15pt; font-weight: bold; margin: 0 0 0.4em; color: #111; border-bottom: 1px solid #ddd; padding-bottom: 0.2em; }
h3 { font-size: 9pt; font-weight: bold; margin: 0.8em 0 0.3em; color: #6b7280; text-transform: uppercase; letter-spacing: 0.05em; }

p { margin: 0.4em 0; }

.title-block {
    border-bottom: 3px solid #4f46e5;
    padding-bottom: 0.8em;
    margin-bottom: 1.5em;
}
.summary dt { font-weight: bold; float: left; clear: left; width: 12em; }
.summary dd { margin: 0 0 0.2em 12em; }

.scene {
    margin-bottom: 1.8em;
}
h2, h3 {
    page-break-after: avoid;
}

/* Frases clave */
.key-sentences {
    list-style: none;
    margin: 0.4em 0;
    padding-left: 0;
}
.key-sentences li {
    margin: 0.3em 0;
    page-break-inside: avoid;
}
.highlight {
    display: inline-block;
    background-color: #fef9c3;
    border: 1px solid #fde68a;
    border-radius: 3px;
    padding: 2px 6px;
    font-weight: bold;
    font-size: 10pt;
}

/* Prompt visual */
.visual-prompt {
    font-family: 'Courier New', monospace;
    font-style: italic;
    font-size: 9pt;
    background-color: #f5f5f5;
    padding: 0.5em 0.8em;
    border-radius: 3px;
}
"""


@dataclass
class PdfWeasyprintExporter:
    """
    Exportador PDF basado en WeasyPrint (HTML → PDF nativo).

    Atributos
    ---------
    name:
        Identificador del exportador.
    base_url:
        URL base para resolver recursos relativos.
        Si es None, WeasyPrint usará el sistema de archivos local.
    """

    name: str = "pdf_weasyprint"
    base_url: str | None = None

    def export_to_bytes(self, html_content: str) -> bytes:
        """
        Genera el PDF en memoria desde un string HTML.

        Raises
        ------
        RuntimeError
            Si WeasyPrint falla al generar el PDF.
        ImportError
            Si WeasyPrint no está instalado.
        """
        try:
            from weasyprint import CSS, HTML
        except ImportError as e:
            raise ImportError(
                "WeasyPrint no está instalado. Ejecutá: pip install weasyprint"
            ) from e

        full_html = _wrap_html(html_content)

        try:
            doc = HTML(string=full_html, base_url=self.base_url)
            css = CSS(string=_BASE_CSS)
            return doc.write_pdf(stylesheets=[css])
        except Exception as e:
            raise RuntimeError(f"WeasyPrint falló al generar el PDF: {e}") from e

    def export_from_html_string(self, html_content: str, output_path: Path) -> Path:
        """
        Genera el PDF desde un string HTML y lo escribe en `output_path`.
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(self.export_to_bytes(html_content))
        return output_path


def _wrap_html(html_content: str) -> str:
    """
    Si el contenido no incluye <html>, lo envuelve en un documento completo.
    Esto garantiza que WeasyPrint tenga el contexto correcto para renderizar.
    """
    stripped = html_content.strip().lower()
    if stripped.startswith("<!doctype") or stripped.startswith("<html"):
        return html_content
    return f"""<!DOCTYPE html>
<html lang="id">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
</head>
<body>
{html_content}
</body>
</html>"""
