import textwrap
from unittest.mock import patch

from generation.response_router import parse_response


DELIMITED = textwrap.dedent("""\
    ### QUESTION 1 ###
    DIFFICULTY: easy
    QUESTION: Test question
    OPTION: Answer [CORRECT]
    OPTION: Wrong
    EXPLANATION: Test explanation
""")

JSON_RESPONSE = textwrap.dedent("""
    {
      "questions": [{
        "question": "JSON format test",
        "options": ["A", "B", "C", "D"],
        "correct_index": 0,
        "difficulty": "easy",
        "explanation": "Testing JSON fallback"
      }]
    }
""")


def test_prefers_delimited_format():
    questions = parse_response(DELIMITED)
    assert [q.text for q in questions] == ["Test question"]


def test_json_when_marker_absent():
    questions = parse_response(JSON_RESPONSE)
    assert [q.text for q in questions] == ["JSON format test"]


def test_falls_back_to_json_when_delimited_yields_nothing():
    raw = (
        "### QUESTION 1 ###\nthis block is garbage\n\n"
        '{"questions": [{"question": "Recovered", "options": ["x"], '
        '"correct_index": 0, "difficulty": "hard"}]}'
    )
    questions = parse_response(raw)
    assert [q.text for q in questions] == ["Recovered"]


def test_json_path_not_tried_when_delimited_succeeds():
    with patch("generation.response_router.parse_json_response") as json_path:
        parse_response(DELIMITED)
    json_path.assert_not_called()


def test_unparsable_responses_yield_empty_list():
    assert parse_response("") == []
    assert parse_response("No JSON here!") == []
    assert parse_response('{"questions": [') == []
    assert parse_response('{"items": []}') == []
    assert parse_response("### QUESTION 1 ###\nnothing useful") == []


def test_blank_question_text_is_filtered_by_validator():
    raw = '{"questions": [{"question": "   ", "options": ["a"], "correct_index": 0, "difficulty": "easy"}]}'
    assert parse_response(raw) == []


def test_crlf_delimited_response():
    questions = parse_response(DELIMITED.replace("\n", "\r\n"))
    assert [q.text for q in questions] == ["Test question"]
