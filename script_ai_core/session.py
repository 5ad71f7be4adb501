from __future__ import annotations

"""
script_ai_core.session
======================

Estado de una sesión de trabajo (un usuario, un documento a la vez).

La sesión es el único dueño del "slot" mutable: `user_input` y un
`GeneratorState` inmutable que se reemplaza entero en cada transición
(inicio, éxito, fallo, reset). El pipeline en sí (`engine.run_script_pipeline`)
no guarda nada.
"""

import threading
from dataclasses import dataclass
from typing import Optional

from .domain_models import (
    DocumentBlob,
    ErrorCategory,
    EstimatedDuration,
    GenerationFailure,
    Script,
    UserInput,
)
from .duration import estimate_duration
from .engine import InFlightGuard, run_script_pipeline
from .errors import DocumentValidationError, GenerationInProgressError, MissingDocumentError
from .export import export_script_pdf
from .validation import validate_document


@dataclass(frozen=True)
class GeneratorState:
    is_generating: bool = False
    error: Optional[str] = None
    error_category: Optional[ErrorCategory] = None
    script: Optional[Script] = None


class ScriptSession:
    def __init__(self, guard: Optional[InFlightGuard] = None) -> None:
        self.user_input = UserInput()
        self.state = GeneratorState()
        self._guard = guard
        self._lock = threading.Lock()

    # ---------- Input ----------

    def set_name(self, name: str) -> None:
        self.user_input = self.user_input.with_name(name)

    def select_document(self, candidate: DocumentBlob) -> None:
        """
        Valida y selecciona un documento. Si no pasa la validación se registra
        el error en el estado, se conserva el documento anterior y se relanza.
        """
        try:
            validate_document(candidate)
        except DocumentValidationError as e:
            self.state = GeneratorState(
                is_generating=self.state.is_generating,
                error=e.message,
                error_category=e.category,
                script=self.state.script,
            )
            raise

        self.user_input = self.user_input.with_document(candidate)
        self.state = GeneratorState(
            is_generating=self.state.is_generating,
            script=self.state.script,
        )

    def clear_document(self) -> None:
        self.user_input = self.user_input.without_document()

    # ---------- Generación ----------

    def generate(self) -> GeneratorState:
        """
        Corre el pipeline para el documento actual y aplica el resultado.

        Raises:
            GenerationInProgressError: si ya hay una generación en curso en esta sesión.
            MissingDocumentError: si no hay documento seleccionado.
        """
        with self._lock:
            if self.state.is_generating:
                raise GenerationInProgressError()

            document = self.user_input.document
            if document is None:
                err = MissingDocumentError()
                self.state = GeneratorState(error=err.message, script=self.state.script)
                raise err

            self.state = GeneratorState(is_generating=True, script=self.state.script)

        name = self.user_input.name
        try:
            result = run_script_pipeline(
                document=validate_document(document),
                user_name=name or None,
                guard=self._guard,
            )
        except Exception:
            self.state = GeneratorState(script=self.state.script)
            raise

        if isinstance(result, GenerationFailure):
            # El guion anterior (si había) queda visible
            self.state = GeneratorState(
                error=result.message,
                error_category=result.category,
                script=self.state.script,
            )
        else:
            self.state = GeneratorState(script=result.script)
        return self.state

    def reset(self) -> None:
        """Proyecto nuevo: limpia input y estado."""
        with self._lock:
            if self.state.is_generating:
                raise GenerationInProgressError()
            self.user_input = UserInput()
            self.state = GeneratorState()

    # ---------- Derivados ----------

    @property
    def estimated_duration(self) -> Optional[EstimatedDuration]:
        return estimate_duration(self.state.script)

    @property
    def can_retry(self) -> bool:
        return self.state.error_category is ErrorCategory.QUOTA_EXCEEDED

    def export_pdf(self) -> bytes:
        if not self.state.script:
            raise RuntimeError("No hay guion para exportar")
        return export_script_pdf(self.state.script, self.user_input.name or None)
