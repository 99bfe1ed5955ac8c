from glossary_api.config import load_settings, parse_language_pairs
from glossary_models import LanguagePair


def test_parse_language_pairs() -> None:
    assert parse_language_pairs("en:de, EN:fr ,broken,:x") == [
        LanguagePair(source="EN", target="DE"),
        LanguagePair(source="EN", target="FR"),
    ]
    assert parse_language_pairs(None) == []


def test_load_settings_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("GLOSSARY_SORT_BY_LANGUAGE", " de ")
    monkeypatch.setenv("DEEPL_API_KEY", "key:fx")
    monkeypatch.setenv("DEEPL_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("GLOSSARY_LANGUAGE_PAIRS", "EN:DE")

    settings = load_settings()
    assert settings.sort_by_language == "DE"
    assert settings.deepl_api_key == "key:fx"
    assert settings.deepl_timeout_seconds == 2.5
    assert settings.language_pairs == [LanguagePair(source="EN", target="DE")]


def test_postgres_url_built_from_parts(monkeypatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    for name, value in {
        "POSTGRES_USER": "u",
        "POSTGRES_PASSWORD": "p",
        "POSTGRES_DB": "glossary",
        "POSTGRES_HOST": "db",
        "POSTGRES_PORT": "5432",
    }.items():
        monkeypatch.setenv(name, value)

    assert load_settings().database_url == "postgresql+psycopg://u:p@db:5432/glossary"
