from __future__ import annotations

from enum import Enum
from typing import Any


class Language(str, Enum):
    """Select the catalog used to render error and log messages.

    Switching languages only changes message text. Error classes and control
    flow stay the same for every language.
    """

    EN_US = "en-us"
    """American English, the default catalog."""

    PT_BR = "pt-br"
    """Brazilian Portuguese."""

    ES_ES = "es-es"
    """European Spanish."""


class MessageKey(str, Enum):
    """Identify a message template inside a catalog."""

    EXPECT_INVOKABLE = "expect_invokable"
    KEY_FROZEN = "key_frozen"
    KEY_IS_NOT_DEFINED = "key_is_not_defined"
    CIRCULAR_DEPENDENCY = "circular_dependency"
    NO_DEPENDENCIES_REGISTERED = "no_dependencies_registered"
    FAILED_TO_RESOLVE_DEPENDENCY = "failed_to_resolve_dependency"
    FAILED_TO_RESOLVE_DUE_TO_UNDEFINED_PARAM = "failed_to_resolve_due_to_undefined_param"
    LANGUAGE_NOT_SUPPORTED = "language_not_supported"


DEFAULT_LANGUAGE = Language.EN_US

MESSAGES: dict[Language, dict[MessageKey, str]] = {
    Language.EN_US: {
        MessageKey.EXPECT_INVOKABLE: "Callable is not a Closure or invokable object.",
        MessageKey.KEY_FROZEN: 'Key "{key}" is frozen and cannot be modified.',
        MessageKey.KEY_IS_NOT_DEFINED: 'Key "{key}" is not defined.',
        MessageKey.CIRCULAR_DEPENDENCY: "Circular dependency detected: {path} -> {constructor_name}",
        MessageKey.NO_DEPENDENCIES_REGISTERED: (
            "No dependencies registered for {class_name}. "
            "Use container.bind({class_name}, [dependencies]) to register dependencies manually."
        ),
        MessageKey.FAILED_TO_RESOLVE_DEPENDENCY: (
            "Failed to resolve dependency {dependency_name} for {constructor_name}: {error}"
        ),
        MessageKey.FAILED_TO_RESOLVE_DUE_TO_UNDEFINED_PARAM: (
            "Failed to resolve dependency for {constructor_name} due to undefined parameter "
            "type. This can happen with circular imports or if a class is not properly "
            "exported/imported."
        ),
        MessageKey.LANGUAGE_NOT_SUPPORTED: "Language '{language}' is not supported. Keeping '{current}'.",
    },
    Language.PT_BR: {
        MessageKey.EXPECT_INVOKABLE: "Callable não é um Closure ou objeto invocável.",
        MessageKey.KEY_FROZEN: 'A chave "{key}" está congelada e não pode ser modificada.',
        MessageKey.KEY_IS_NOT_DEFINED: 'A chave "{key}" não está definida.',
        MessageKey.CIRCULAR_DEPENDENCY: "Dependência circular detectada: {path} -> {constructor_name}",
        MessageKey.NO_DEPENDENCIES_REGISTERED: (
            "Nenhuma dependência registrada para {class_name}. "
            "Use container.bind({class_name}, [dependencias]) para registrar dependências "
            "manualmente."
        ),
        MessageKey.FAILED_TO_RESOLVE_DEPENDENCY: (
            "Não foi possível resolver a dependência {dependency_name} para "
            "{constructor_name}: {error}"
        ),
        MessageKey.FAILED_TO_RESOLVE_DUE_TO_UNDEFINED_PARAM: (
            "Não foi possível resolver a dependência para {constructor_name} devido a um tipo "
            "de parâmetro indefinido. Isso pode acontecer com importações circulares ou se uma "
            "classe não for exportada/importada corretamente."
        ),
        MessageKey.LANGUAGE_NOT_SUPPORTED: "Idioma '{language}' não suportado. Mantendo '{current}'.",
    },
    Language.ES_ES: {
        MessageKey.EXPECT_INVOKABLE: "Callable no es un Closure u objeto invocable.",
        MessageKey.KEY_FROZEN: 'La clave "{key}" está congelada y no puede ser modificada.',
        MessageKey.KEY_IS_NOT_DEFINED: 'La clave "{key}" no está definida.',
        MessageKey.CIRCULAR_DEPENDENCY: "Dependencia circular detectada: {path} -> {constructor_name}",
        MessageKey.NO_DEPENDENCIES_REGISTERED: (
            "No se han registrado dependencias para {class_name}. "
            "Use container.bind({class_name}, [dependencias]) para registrar dependencias "
            "manualmente."
        ),
        MessageKey.FAILED_TO_RESOLVE_DEPENDENCY: (
            "No se pudo resolver la dependencia {dependency_name} para {constructor_name}: {error}"
        ),
        MessageKey.FAILED_TO_RESOLVE_DUE_TO_UNDEFINED_PARAM: (
            "No se pudo resolver la dependencia para {constructor_name} debido a un tipo de "
            "parámetro indefinido. Esto puede ocurrir con importaciones circulares o si una "
            "clase no se exporta/importa correctamente."
        ),
        MessageKey.LANGUAGE_NOT_SUPPORTED: "Idioma '{language}' no soportado. Manteniendo '{current}'.",
    },
}


def parse_language(value: Language | str) -> Language | None:
    """Return the ``Language`` matching ``value`` or ``None`` when unsupported.

    Matching is case-insensitive and accepts underscores in place of dashes,
    so ``"PT_BR"`` and ``"pt-br"`` both select Brazilian Portuguese.

    Args:
        value: Language member or language code.

    """
    if isinstance(value, Language):
        return value
    if not isinstance(value, str):
        return None
    normalized = value.strip().lower().replace("_", "-")
    try:
        return Language(normalized)
    except ValueError:
        return None


def render_message(
    message_key: MessageKey,
    language: Language = DEFAULT_LANGUAGE,
    /,
    **params: Any,
) -> str:
    """Render the ``message_key`` template of the ``language`` catalog with ``params``.

    Templates missing from a catalog fall back to the default language.

    Args:
        message_key: Message template identifier.
        language: Catalog to render from.
        **params: Values substituted into the template placeholders.

    """
    catalog = MESSAGES.get(language, MESSAGES[DEFAULT_LANGUAGE])
    template = catalog.get(message_key, MESSAGES[DEFAULT_LANGUAGE][message_key])
    return template.format(**params)


__all__ = [
    "DEFAULT_LANGUAGE",
    "MESSAGES",
    "Language",
    "MessageKey",
    "parse_language",
    "render_message",
]
