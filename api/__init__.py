"""
API HTTP para script-ai-core.

Esta capa expone endpoints REST que usan el core interno (script_ai_core.engine)
para generar guiones de video y exportarlos a PDF.

La API está diseñada para ser consumida por:
- UI web (subida de documento, tabla de escenas, descarga)
- Scripts de automatización
"""
