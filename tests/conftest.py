import json

import pytest

from script_ai_core.domain_models import MEDIA_TYPE_PDF, DocumentBlob, ScriptScene
from script_ai_core.engine import InFlightGuard


@pytest.fixture
def wire_scenes():
    """Escenas tal como las devuelve el modelo (claves del contrato)."""
    return [
        {
            "scene": "Pembukaan",
            "narasi": "Halo. Pada video ini saya akan menjelaskan materi penting berdasarkan dokumen yang Anda pelajari.",
            "kalimatKunci": ["Materi penting", "Berdasarkan dokumen"],
            "visual": "Professor standing in front of a whiteboard, educational illustration",
        },
        {
            "scene": "Fotosintesis",
            "narasi": "Fotosintesis mengubah cahaya matahari menjadi energi kimia di dalam daun.",
            "kalimatKunci": ["Cahaya menjadi energi", "Terjadi di daun", "Butuh klorofil"],
            "visual": "Green leaf cross-section with sunlight arrows, clean infographic",
        },
    ]


@pytest.fixture
def wire_json(wire_scenes):
    return json.dumps({"scenes": wire_scenes})


@pytest.fixture
def script():
    return (
        ScriptScene(
            scene="Pembukaan",
            narration="Halo, saya Budi. Selamat datang di kelas ini.",
            key_sentences=("Selamat datang",),
            visual_prompt="Friendly professor waving, flat illustration",
        ),
        ScriptScene(
            scene="Penutup",
            narration="Terima kasih sudah menonton. Tonton video lainnya!",
            key_sentences=("Kesimpulan", "Tonton video lain"),
            visual_prompt="Closing slide with subscribe button",
        ),
    )


@pytest.fixture
def pdf_blob():
    return DocumentBlob.from_bytes("materi.pdf", MEDIA_TYPE_PDF, b"%PDF-1.4\n% sample document\n")


@pytest.fixture
def guard():
    return InFlightGuard()
