from script_ai_core.domain_models import EstimatedDuration, ScriptScene
from script_ai_core.duration import count_words, estimate_duration


def _scene(words: int, sep: str = " ") -> ScriptScene:
    return ScriptScene(
        scene="S",
        narration=sep.join(["kata"] * words),
        key_sentences=("k",),
        visual_prompt="v",
    )


def test_350_words_is_two_minutes_thirty():
    script = (_scene(200), _scene(150, sep="\n\t "))
    assert count_words(script) == 350
    assert estimate_duration(script) == EstimatedDuration(minutes=2, seconds=30)


def test_no_script_means_no_estimate():
    assert estimate_duration(None) is None
    assert estimate_duration(()) is None


def test_rounding_and_split():
    # 100 palabras → 42.857s → 43s
    assert estimate_duration((_scene(100),)) == EstimatedDuration(minutes=0, seconds=43)
    # 700 palabras → 300s exactos
    assert estimate_duration((_scene(700),)) == EstimatedDuration(minutes=5, seconds=0)


def test_monotonic_in_word_count():
    previous = 0
    for words in range(0, 1000, 37):
        total = estimate_duration((_scene(words),)).total_seconds
        assert total >= previous
        previous = total


def test_label():
    assert str(EstimatedDuration(minutes=5, seconds=7)) == "5 Menit 7 Detik"
