from glossary_api.utils.aggregates import build_aggregates, extract_languages, sort_aggregates
from glossary_models import GlossaryEntry, LanguagePair


def _entry(identifier: str, lang: str, text: str) -> GlossaryEntry:
    return GlossaryEntry(aggregate_identifier=identifier, glossary_language=lang, text=text)


def test_build_groups_and_sorts_by_language() -> None:
    entries = [
        _entry("1", "EN", "zebra"),
        _entry("2", "DE", "Apfel"),
        _entry("1", "DE", "Zebra"),
        _entry("2", "EN", "apple"),
    ]
    aggregates = build_aggregates(entries, "EN")
    assert list(aggregates) == ["2", "1"]
    assert aggregates["1"] == {"EN": "zebra", "DE": "Zebra"}


def test_sort_is_lexicographic() -> None:
    aggregates = {"a": {"EN": "b"}, "b": {"EN": "B"}, "c": {"EN": "a"}}
    assert list(sort_aggregates(aggregates, "EN")) == ["b", "c", "a"]


def test_aggregates_missing_sort_language_go_last(caplog) -> None:
    aggregates = {
        "x": {"DE": "Haus"},
        "y": {"EN": "tree"},
        "w": {"DE": "Baum"},
        "z": {"EN": "apple"},
    }
    ordered = sort_aggregates(aggregates, "EN")
    assert list(ordered) == ["z", "y", "w", "x"]
    assert "lack the sort language" in caplog.text


def test_sort_without_language_uses_identifier() -> None:
    aggregates = {"b": {"EN": "a"}, "a": {"EN": "b"}}
    assert list(sort_aggregates(aggregates, None)) == ["a", "b"]


def test_extract_languages_sources_first() -> None:
    pairs = [
        LanguagePair(source="EN", target="DE"),
        LanguagePair(source="EN", target="FR"),
        LanguagePair(source="DE", target="FR"),
    ]
    assert extract_languages(pairs) == ["EN", "DE", "FR"]


def test_extract_languages_skips_empty_and_normalizes() -> None:
    pairs = [
        LanguagePair(source="fr", target="ja"),
        LanguagePair(source="", target="en"),
        LanguagePair(source="de", target="FR"),
    ]
    assert extract_languages(pairs) == ["FR", "DE", "JA", "EN"]
