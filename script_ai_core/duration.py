from __future__ import annotations

import math
from typing import Optional, Sequence

from .domain_models import EstimatedDuration, ScriptScene

WORDS_PER_MINUTE = 140


def count_words(script: Sequence[ScriptScene]) -> int:
    return sum(len(scene.narration.split()) for scene in script)


def estimate_duration(script: Optional[Sequence[ScriptScene]]) -> Optional[EstimatedDuration]:
    """
    Estima la duración hablada del guion a 140 palabras por minuto.

    Sin guion (None o vacío) no hay estimación: devuelve None, no 0:00.
    """
    if not script:
        return None

    # Redondeo half-up sobre los segundos totales
    total_seconds = int(math.floor(count_words(script) / WORDS_PER_MINUTE * 60 + 0.5))
    minutes, seconds = divmod(total_seconds, 60)
    return EstimatedDuration(minutes=minutes, seconds=seconds)
