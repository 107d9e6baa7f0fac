import json

import pytest

from resumeai.errors import InvalidModelOutput
from resumeai.services.extraction import delimited_span, extract_json_array, extract_json_object


def test_bare_array_parses_like_json_loads():
    text = '[{"id": "a", "prerequisiteIds": [], "childrenIds": ["b"]}, {"id": "b"}]'
    assert extract_json_array(text) == json.loads(text)


def test_bare_object_parses_like_json_loads():
    text = '{"profile": "x", "experience": [{"description": ["a", "b"]}]}'
    assert extract_json_object(text) == json.loads(text)


def test_array_wrapped_in_prose_and_fence():
    text = 'Here you go:\n```json\n[{"id": "bsn-degree"}]\n```\nGood luck!'
    assert extract_json_array(text) == [{"id": "bsn-degree"}]


def test_object_wrapped_in_prose():
    assert extract_json_object('Sure! {"profile": "Nurse"} Hope that helps.') == {"profile": "Nurse"}


@pytest.mark.parametrize("text", ["", "no json here", "only an opener [", "only a closer ]"])
def test_array_missing_delimiters(text):
    with pytest.raises(InvalidModelOutput):
        extract_json_array(text)


def test_object_missing_delimiters():
    with pytest.raises(InvalidModelOutput):
        extract_json_object('["an", "array"]')


def test_closer_before_opener_is_invalid():
    with pytest.raises(InvalidModelOutput):
        extract_json_array("] then [")


def test_trailing_bracket_in_commentary_breaks_the_parse():
    # first-opener / last-closer heuristic sweeps the commentary in
    text = '[{"id": "a"}]\nNote: see step [2] for details.'
    assert delimited_span(text, "[", "]") == '[{"id": "a"}]\nNote: see step [2]'
    with pytest.raises(InvalidModelOutput):
        extract_json_array(text)


def test_unparsable_span_keeps_cause():
    with pytest.raises(InvalidModelOutput) as info:
        extract_json_object("{not: json}")
    assert info.value.message == "AI did not return valid JSON."
    assert isinstance(info.value.__cause__, ValueError)


@pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
def test_non_json_constants_are_rejected(constant):
    with pytest.raises(InvalidModelOutput):
        extract_json_array(f'[{{"id": "a", "score": {constant}}}]')
    with pytest.raises(InvalidModelOutput):
        extract_json_object(f'{{"profile": {constant}}}')
