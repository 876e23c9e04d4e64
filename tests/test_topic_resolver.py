import pytest

from generation.errors import TopicNotFound
from services.topic_resolver import resolve_topic, subtopic_matches


def test_exact_token_with_subtopic(catalog):
    resolved = resolve_topic("Java records", catalog)
    assert resolved.topic.name == "Java"
    assert resolved.subtopic == "records"


def test_exact_token_alone(catalog):
    resolved = resolve_topic("java", catalog)
    assert resolved.topic.name == "Java"
    assert resolved.subtopic is None


def test_exact_token_anywhere_keeps_other_tokens_in_order(catalog):
    resolved = resolve_topic("advanced  react   hooks", catalog)
    assert resolved.topic.name == "React"
    assert resolved.subtopic == "advanced hooks"


def test_first_matching_token_wins(catalog):
    resolved = resolve_topic("JavaScript React", catalog)
    assert resolved.topic.name == "JavaScript"
    assert resolved.subtopic == "React"


def test_whole_input_fuzzy_has_no_subtopic(catalog):
    # "pythonic" contains "python"
    resolved = resolve_topic("pythonic", catalog)
    assert resolved.topic.name == "Python"
    assert resolved.subtopic is None


def test_whole_input_fuzzy_follows_catalog_order(catalog):
    # "Jav" is contained in both "Java" and "JavaScript"; Java comes first
    assert resolve_topic("Jav", catalog).topic.name == "Java"


def test_whole_input_contained_in_multi_word_name(catalog):
    resolved = resolve_topic("act Nat", catalog)
    assert resolved.topic.name == "React Native"
    assert resolved.subtopic is None


def test_first_token_fuzzy_keeps_rest_as_subtopic(catalog):
    # whole input matches nothing, "reac" is contained in "React"
    resolved = resolve_topic("Reac hooks advanced", catalog)
    assert resolved.topic.name == "React"
    assert resolved.subtopic == "hooks advanced"


def test_not_found(catalog):
    with pytest.raises(TopicNotFound) as exc:
        resolve_topic("NonExistentTopic", catalog)
    assert "Topic not found" in str(exc.value)


def test_blank_query_not_found(catalog):
    with pytest.raises(TopicNotFound):
        resolve_topic("   ", catalog)


def test_empty_catalog(catalog):
    with pytest.raises(TopicNotFound):
        resolve_topic("Java", [])


def test_subtopic_containment():
    assert subtopic_matches("records", "record")
    assert subtopic_matches("Records", "RECORDS")
    assert subtopic_matches("records", None)
    assert not subtopic_matches(None, "records")
    assert not subtopic_matches("hooks", "records")
