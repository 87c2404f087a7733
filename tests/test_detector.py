import pytest

from notesense.detector import SemanticDetector, detect
from notesense.schemas import MuscleGroup, TokenType


@pytest.mark.parametrize("text", ["", "   ", "\n\t "])
def test_blank_input_short_circuits(text: str):
    result = detect(text)

    assert result.tokens == ()
    assert result.issues == ()
    assert result.has_detections is False
    assert result.body_part_count == 0
    assert result.symptom_count == 0


def test_detect_is_idempotent():
    text = "Left knee sore after squats, wrist a bit tight"
    assert detect(text) == detect(text)


def test_longest_alias_precedence():
    result = detect("my lower back hurts")

    assert [t.text for t in result.tokens] == ["lower back"]
    assert result.tokens[0].normalized_value is MuscleGroup.lower_back


def test_shoulder_pain_fans_out_to_all_delts():
    result = detect("shoulder pain")

    assert [i.body_part for i in result.issues] == [
        MuscleGroup.front_delt,
        MuscleGroup.side_delt,
        MuscleGroup.rear_delt,
    ]
    assert {i.symptom for i in result.issues} == {"pain"}
    assert {i.raw_text for i in result.issues} == {"shoulder pain"}


def test_nearest_pairing_has_no_cross_pairs():
    result = detect("knee sore, wrist tight")
    pairs = {(i.body_part, i.symptom) for i in result.issues}

    assert pairs == {(MuscleGroup.quads, "sore"), (MuscleGroup.forearms, "tight")}


def test_dangling_symptom_counts_but_yields_no_issue():
    result = detect("feeling sore today")

    assert result.issues == ()
    assert result.symptom_count == 1
    assert result.body_part_count == 0
    assert result.has_detections is True


def test_case_is_preserved_in_tokens_and_lowered_in_issues():
    result = detect("TIGHT Shoulder")

    assert [t.text for t in result.tokens] == ["TIGHT", "Shoulder"]
    assert len(result.issues) == 3
    assert all(issue.symptom == "tight" for issue in result.issues)
    assert result.issues[0].raw_text == "TIGHT Shoulder"


@pytest.mark.parametrize(
    "text",
    [
        "knee (sore) [x] .* +? ^$ \\b",
        "|||||",
        "(?P<name>pain)",
        "shoulder\\ pain",
    ],
)
def test_regex_special_characters_are_literal(text: str):
    result = detect(text)
    for token in result.tokens:
        assert text[token.start_index:token.end_index] == token.text


@pytest.mark.parametrize(
    "text",
    [
        "tight hamstrings, sore calves and sharp shoulder pain",
        "back back back sore sore",
        "Elbows clicking, hips stiff; neck and traps tender, groin cramp",
    ],
)
def test_sort_and_non_overlap_invariants(text: str):
    result = detect(text)
    starts = [t.start_index for t in result.tokens]
    assert starts == sorted(starts)

    for kind in TokenType:
        spans = [(t.start_index, t.end_index) for t in result.tokens if t.type is kind]
        for (_, prev_end), (next_start, _) in zip(spans, spans[1:]):
            assert prev_end <= next_start

    assert result.body_part_count + result.symptom_count == len(result.tokens)


def test_detector_from_config_reads_length_cap():
    detector = SemanticDetector.from_config({"max_text_length": 10})

    assert detector.max_text_length == 10
    assert detector.accepts("short")
    assert not detector.accepts("this note is too long")


@pytest.mark.parametrize("data", [None, {}, {"max_text_length": "ten"}, {"max_text_length": 0}])
def test_detector_from_config_falls_back_to_default(data):
    assert SemanticDetector.from_config(data).max_text_length == SemanticDetector().max_text_length


def test_length_cap_does_not_change_detection():
    detector = SemanticDetector(max_text_length=3)
    assert detector.detect("knee sore").issues == detect("knee sore").issues


def test_non_ascii_lookalike_symptom_is_not_detected():
    result = detect("knee ſore")

    assert result.symptom_count == 0
    assert result.issues == ()


def test_accented_prefix_does_not_hide_body_part():
    result = detect("éknee sore")

    assert result.body_part_count == 1
    assert [(i.body_part, i.symptom) for i in result.issues] == [(MuscleGroup.quads, "sore")]


def test_result_collections_are_immutable():
    result = detect("shoulder pain")

    assert isinstance(result.tokens, tuple)
    assert isinstance(result.issues, tuple)
    with pytest.raises(AttributeError):
        result.issues.append(result.issues[0])  # type: ignore[attr-defined]
