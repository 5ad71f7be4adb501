"""
Core del generador de guiones de video a partir de documentos.

Este paquete contiene la lógica sin HTTP ni frameworks:
- Validación y codificación del documento (validation, encoding)
- Request y parsing del modelo (prompts, script_engine, llm_client)
- Clasificación de errores (errors)
- Orquestación y estado de sesión (engine, session)
- Derivados del guion: duración estimada y export (duration, renderer, export)
"""

__version__ = "0.1.0"
