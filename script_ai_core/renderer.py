from __future__ import annotations

"""
script_ai_core.renderer
=======================

Render del guion final a HTML (fuente del PDF) y a Markdown (artefacto de CLI).

Estructura (igual en ambos formatos):
  - Bloque de título: "Naskah Video Edukasi", docente (si hay), cantidad de
    escenas y duración estimada.
  - Una sección por escena, en orden:
      * etiqueta de la escena
      * narración completa
      * frases clave (lista, en el orden original, cada una resaltada)
      * prompt visual

Todo el texto se reproduce literal: sin truncar ni reordenar. En HTML solo se
escapa lo necesario para que el contenido no se interprete como markup.
"""

from html import escape
from typing import List, Optional, Sequence

from .domain_models import ScriptScene
from .duration import estimate_duration

DOCUMENT_TITLE = "Naskah Video Edukasi"

LABEL_PRESENTER = "Pengajar"
LABEL_SCENES = "Jumlah Scene"
LABEL_DURATION = "Estimasi Durasi Video"
LABEL_NARRATION = "Narasi (Voice Over)"
LABEL_KEY_SENTENCES = "Kalimat Kunci"
LABEL_VISUAL = "Visual (Prompt AI)"


def _summary_items(script: Sequence[ScriptScene], user_name: Optional[str]) -> List[tuple[str, str]]:
    items: List[tuple[str, str]] = []
    name = (user_name or "").strip()
    if name:
        items.append((LABEL_PRESENTER, name))
    items.append((LABEL_SCENES, str(len(script))))
    duration = estimate_duration(script)
    if duration is not None:
        items.append((LABEL_DURATION, str(duration)))
    return items


def render_script_html(script: Sequence[ScriptScene], user_name: Optional[str] = None) -> str:
    """
    Renderiza el guion como fragmento HTML (sin <html>/<head>).

    El exportador WeasyPrint lo envuelve en un documento completo con el CSS base.
    """
    lines: List[str] = []
    lines.append('<header class="title-block">')
    lines.append(f"<h1>{escape(DOCUMENT_TITLE)}</h1>")
    lines.append('<dl class="summary">')
    for label, value in _summary_items(script, user_name):
        lines.append(f"<dt>{escape(label)}</dt><dd>{escape(value)}</dd>")
    lines.append("</dl>")
    lines.append("</header>")

    for idx, item in enumerate(script, start=1):
        lines.append(f'<section class="scene" id="scene-{idx}">')
        lines.append(f"<h2>{escape(item.scene)}</h2>")

        lines.append(f"<h3>{escape(LABEL_NARRATION)}</h3>")
        lines.append(f'<p class="narration">{escape(item.narration)}</p>')

        lines.append(f"<h3>{escape(LABEL_KEY_SENTENCES)}</h3>")
        lines.append('<ul class="key-sentences">')
        for sentence in item.key_sentences:
            lines.append(f'<li><span class="highlight">{escape(sentence)}</span></li>')
        lines.append("</ul>")

        lines.append(f"<h3>{escape(LABEL_VISUAL)}</h3>")
        lines.append(f'<p class="visual-prompt">{escape(item.visual_prompt)}</p>')
        lines.append("</section>")

    return "\n".join(lines)


def render_script_markdown(script: Sequence[ScriptScene], user_name: Optional[str] = None) -> str:
    lines: List[str] = []
    lines.append(f"# {DOCUMENT_TITLE}\n\n")
    for label, value in _summary_items(script, user_name):
        lines.append(f"- {label}: {value}\n")
    lines.append("\n")

    for item in script:
        lines.append(f"## {item.scene}\n\n")
        lines.append(f"### {LABEL_NARRATION}\n\n")
        lines.append(f"{item.narration}\n\n")
        lines.append(f"### {LABEL_KEY_SENTENCES}\n\n")
        for sentence in item.key_sentences:
            lines.append(f"- **{sentence}**\n")
        lines.append("\n")
        lines.append(f"### {LABEL_VISUAL}\n\n")
        lines.append(f"*{item.visual_prompt}*\n\n")
        lines.append("---\n\n")

    return "".join(lines)
