from datetime import datetime

import pytest

from conftest import utc
from glossary_api.staleness import StalenessEvaluator
from glossary_models import RemoteGlossaryDescriptor


def _descriptor(source: str, target: str, created, ready: bool = True) -> RemoteGlossaryDescriptor:
    return RemoteGlossaryDescriptor(source_lang=source, target_lang=target, creation_time=created, ready=ready)


@pytest.mark.parametrize(
    "created, expected",
    [
        (utc(2023, 5, 1), True),   # older than the DE edit
        (utc(2023, 7, 1), False),  # newer than both
        (utc(2022, 12, 1), True),  # older than both
    ],
)
def test_outdated_against_either_language(created, expected) -> None:
    evaluator = StalenessEvaluator({"EN": utc(2023, 1, 1), "DE": utc(2023, 6, 1)})
    assert evaluator.is_outdated(_descriptor("EN", "DE", created)) is expected


def test_equal_timestamps_are_not_outdated() -> None:
    evaluator = StalenessEvaluator({"EN": utc(2023, 1, 1)})
    assert evaluator.is_outdated(_descriptor("EN", "DE", utc(2023, 1, 1))) is False


def test_language_without_local_entries_never_outdates() -> None:
    evaluator = StalenessEvaluator({"EN": utc(2023, 1, 1)})
    assert evaluator.is_outdated(_descriptor("FR", "DE", utc(1999, 1, 1))) is False
    assert evaluator.is_outdated(_descriptor("EN", "FR", utc(2022, 1, 1))) is True


def test_naive_local_timestamps_are_treated_as_utc() -> None:
    evaluator = StalenessEvaluator({"EN": datetime(2023, 1, 1, 12, 0, 0)})
    assert evaluator.is_outdated(_descriptor("EN", "DE", utc(2023, 1, 1, 11, 59, 59))) is True
    assert evaluator.is_outdated(_descriptor("EN", "DE", utc(2023, 1, 1, 12, 0, 1))) is False


def test_evaluate_builds_sorted_status_map() -> None:
    evaluator = StalenessEvaluator(
        {"EN": utc(2023, 1, 1), "DE": utc(2023, 6, 1)},
        glossary_key=lambda source, target: f"{source}->{target}",
    )
    statuses = evaluator.evaluate(
        [
            _descriptor("en", "fr", utc(2023, 7, 1, 9, 5, 3), ready=False),
            _descriptor("de", "en", utc(2023, 5, 1)),
        ]
    )
    assert list(statuses) == ["DE->EN", "EN->FR"]

    en_fr = statuses["EN->FR"].model_dump(by_alias=True)
    assert en_fr == {
        "sourceLang": "EN",
        "targetLang": "FR",
        "creationDate": "01.07.2023 09:05:03",
        "isOutdated": False,
        "canBeUsed": False,
    }
    assert statuses["DE->EN"].is_outdated is True


def test_creation_time_parsed_from_api_string() -> None:
    descriptor = RemoteGlossaryDescriptor.model_validate(
        {
            "glossary_id": "def3a26b-3e84-45b3-84ae-0c0aaf3525f7",
            "name": "My Glossary",
            "ready": True,
            "source_lang": "en",
            "target_lang": "de",
            "creation_time": "2021-08-03T14:16:18.329Z",
            "entry_count": 1,
        }
    )
    assert descriptor.source_lang == "EN"
    assert descriptor.creation_time == utc(2021, 8, 3, 14, 16, 18, 329000)
