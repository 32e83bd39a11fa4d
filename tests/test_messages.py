import logging

import pytest

from wirebox.container import Container
from wirebox.messages import MESSAGES, Language, MessageKey, parse_language, render_message


def test_every_catalog_defines_every_message() -> None:
    for language in Language:
        assert set(MESSAGES[language]) == set(MessageKey)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Language.PT_BR, Language.PT_BR),
        ("pt-br", Language.PT_BR),
        ("PT_BR", Language.PT_BR),
        (" es-es ", Language.ES_ES),
        ("fr-fr", None),
        (None, None),
    ],
)
def test_parse_language(value: object, expected: Language | None) -> None:
    assert parse_language(value) is expected  # type: ignore[arg-type]


def test_render_message_formats_params() -> None:
    assert render_message(MessageKey.KEY_IS_NOT_DEFINED, key="x") == 'Key "x" is not defined.'
    assert (
        render_message(MessageKey.KEY_IS_NOT_DEFINED, Language.PT_BR, key="x")
        == 'A chave "x" não está definida.'
    )


def test_default_language(container: Container) -> None:
    assert container.get_language() is Language.EN_US


def test_set_language(container: Container) -> None:
    container.set_language("pt-br")

    assert container.get_language() is Language.PT_BR


def test_unsupported_language_is_ignored_with_warning(
    container: Container,
    caplog: pytest.LogCaptureFixture,
) -> None:
    container.set_language("pt-br")

    with caplog.at_level(logging.WARNING, logger="wirebox.container"):
        container.set_language("fr-fr")

    assert container.get_language() is Language.PT_BR
    assert "Idioma 'fr-fr' não suportado. Mantendo 'pt-br'." in caplog.text


def test_language_argument_overrides_settings() -> None:
    container = Container(language="es-es")

    assert container.get_language() is Language.ES_ES


def test_render_message_accepts_params_named_like_its_arguments() -> None:
    assert render_message(MessageKey.KEY_FROZEN, Language.EN_US, key="k") == (
        'Key "k" is frozen and cannot be modified.'
    )
    assert render_message(
        MessageKey.LANGUAGE_NOT_SUPPORTED,
        Language.EN_US,
        language="fr-fr",
        current="en-us",
    ) == "Language 'fr-fr' is not supported. Keeping 'en-us'."
