"""
Modelos de request/response para la API.

Estos modelos definen la estructura esperada de los requests HTTP,
validando tipos y valores antes de pasarlos al core.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from script_ai_core.domain_models import EstimatedDuration, ScriptScene


class ScriptSceneModel(BaseModel):
    """Una escena del guion, tal como la ve la UI."""

    scene: str = Field(..., description="Etiqueta o título de la escena")
    narration: str = Field(..., description="Narración para voice-over")
    key_sentences: List[str] = Field(..., description="Frases clave en orden de presentación")
    visual_prompt: str = Field(..., description="Prompt (en inglés) para generar la imagen")

    @classmethod
    def from_scene(cls, scene: ScriptScene) -> "ScriptSceneModel":
        return cls(
            scene=scene.scene,
            narration=scene.narration,
            key_sentences=list(scene.key_sentences),
            visual_prompt=scene.visual_prompt,
        )

    def to_scene(self) -> ScriptScene:
        return ScriptScene(
            scene=self.scene,
            narration=self.narration,
            key_sentences=tuple(self.key_sentences),
            visual_prompt=self.visual_prompt,
        )


class DurationModel(BaseModel):
    minutes: int = Field(..., ge=0)
    seconds: int = Field(..., ge=0, le=59)
    label: str = Field(..., description="Texto listo para mostrar (ej: '2 Menit 30 Detik')")

    @classmethod
    def from_estimate(cls, estimate: Optional[EstimatedDuration]) -> Optional["DurationModel"]:
        if estimate is None:
            return None
        return cls(minutes=estimate.minutes, seconds=estimate.seconds, label=str(estimate))


class ScriptRunResponse(BaseModel):
    """
    Response de una generación exitosa.

    Los fallos no usan este modelo: se devuelven como HTTPException con
    `detail={category, message, can_retry}`.
    """

    status: str = Field(default="completed", description="Estado de la generación")
    filename: str = Field(..., description="Nombre del documento de origen")
    scenes: List[ScriptSceneModel] = Field(default_factory=list)
    estimated_duration: Optional[DurationModel] = None


class ExportRequest(BaseModel):
    """Request para exportar un guion ya generado a PDF."""

    name: Optional[str] = Field(default=None, description="Nombre del docente (título y archivo)")
    scenes: List[ScriptSceneModel] = Field(..., min_length=1)


class DurationRequest(BaseModel):
    scenes: List[ScriptSceneModel] = Field(default_factory=list)


class DurationResponse(BaseModel):
    estimated_duration: Optional[DurationModel] = None
