"""Enumerations for i18nextract type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class MatchKind(StrEnum):
    """Kind of node recognized by the pattern matcher.

    StrEnum provides automatic string conversion: str(MatchKind.TRANSLATE_CALL) == "translate_call"
    """

    TEXT_COMPONENT = "text_component"
    """Translation text component: <Trans i18nKey="greeting">Hello</Trans>"""

    NAMESPACE_COMPONENT = "namespace_component"
    """Namespace-scope component: <I18n ns={['app', 'common']}>...</I18n>"""

    TRANSLATE_CALL = "translate_call"
    """Translate function call: t('greeting', 'Hello')"""

    WRAP_NAMESPACES = "wrap_namespaces"
    """Wrap-with-namespaces call: translate(['app', 'common'])(Component)"""


class WriteStatus(StrEnum):
    """Outcome of writing one catalog file.

    StrEnum provides automatic string conversion: str(WriteStatus.CREATED) == "created"
    """

    CREATED = "created"
    """File did not exist and was written."""

    UPDATED = "updated"
    """File existed and the merged content differed."""

    UNCHANGED = "unchanged"
    """Merged content equals the file content; nothing written."""


__all__ = [
    "MatchKind",
    "WriteStatus",
]
