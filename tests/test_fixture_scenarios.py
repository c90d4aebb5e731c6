"""End-to-end scenarios modelled on typical react-i18next components.

Each scenario extracts one component with locales en/fr and the default
namespace "react", then compares the written catalog files.
"""

from __future__ import annotations

import json

import pytest

from i18nextract import ExtractorConfig, MemoryStorage, MessageExtractor
from i18nextract.syntax.ast import Node, OpaqueNode
from tests.helpers.builders import arr, arrow, call, concat, element, expr, ident, imports, obj, program, s

TRANSLATION_CATALOG = {
    "first": "",
    "second": "this is a default message.",
    "third": "default message",
    "third_contextA": "default message",
    "fourth": "default message",
    "fifth": "{{var}} value",
    "sixth": "",
    "seventh": {"first": "", "fallbackA": "", "fallbackB": ""},
    "eighth": {
        "friend": "",
        "friend_male": "",
        "friend_female": "",
        "friends": "",
        "friends_plural": "",
        "contextplural": "",
        "contextplural_contextA": "",
        "contextplural_contextA_plural": "",
    },
    "ninth": "My name is {{name}}.",
}


def _p(node: Node) -> Node:
    return element("p", expr(node))


def _render_body() -> tuple[Node, ...]:
    """The t() calls shared by the class component scenarios."""
    return (
        element("h1", expr(call("t", s("first")))),
        _p(call("t", s("second"), s("this is a default message."))),
        _p(call("t", s("third"), s("default message"), s("contextA"))),
        _p(call("t", s("fourth"), obj(("defaultValue", s("default message"))))),
        _p(call("t", s("fifth"), obj(("defaultValue", s("{{var}} value"))))),
        _p(call("t", concat(s("six"), s("th")))),
        _p(call("t", arr(s("seventh.first"), s("seventh.fallbackA"), s("seventh.fallbackB")))),
        _p(call("t", s("eighth.friend"), obj(("context", s("male"))))),
        _p(call("t", s("eighth.friend"), obj(("context", s("female"))))),
        _p(call("t", s("eighth.friends"), obj(shorthand=("count",)))),
        _p(call("t", s("eighth.contextplural"), obj(("context", s("contextA")), shorthand=("count",)))),
        _p(
            call(
                "t",
                s("ninth"),
                obj(("name", s("name")), ("defaultValue", s("My name is {{name}}."))),
            )
        ),
    )


def _class_component(*extra: Node) -> OpaqueNode:
    return OpaqueNode("ClassDeclaration", (element("div", *_render_body(), *extra),))


def _read(storage: MemoryStorage, locale: str, namespace: str) -> object:
    return json.loads(storage.files[f"locales/{locale}/{namespace}.json"])


@pytest.fixture
def scenario_config(storage: MemoryStorage) -> ExtractorConfig:
    return ExtractorConfig.from_mapping(
        {
            "output": "locales",
            "locales": ["en", "fr"],
            "fs": storage,
            "namespaceSeperator": ":",
            "defaultNamespace": "react",
        }
    )


class TestTranslationScenario:
    """Class component wrapped with translate('react')."""

    def test_catalog(self, scenario_config: ExtractorConfig, storage: MemoryStorage) -> None:
        source = program(
            imports("translate"),
            _class_component(),
            OpaqueNode("ExportDefaultDeclaration", (call(call("translate", s("react")), ident("Test")),)),
        )

        MessageExtractor(scenario_config).extract(source, "translation/actual.js")

        for locale in ("en", "fr"):
            assert _read(storage, locale, "react") == TRANSLATION_CATALOG
        assert set(storage.files) == {"locales/en/react.json", "locales/fr/react.json"}


class TestTranslateHocArrayScenario:
    """translate(['react', 'anotherNS']) with a prefixed key."""

    def test_catalogs(self, scenario_config: ExtractorConfig, storage: MemoryStorage) -> None:
        source = program(
            imports("translate", "Trans", "Interpolate"),
            _class_component(_p(call("t", s("anotherNS:first")))),
            OpaqueNode(
                "ExportDefaultDeclaration",
                (call(call("translate", arr(s("react"), s("anotherNS"))), ident("Test")),),
            ),
        )

        MessageExtractor(scenario_config).extract(source, "translate-hoc-array/actual.js")

        for locale in ("en", "fr"):
            assert _read(storage, locale, "react") == TRANSLATION_CATALOG
            assert _read(storage, locale, "anotherNS") == {"first": ""}


class TestRenderPropsScenario:
    """<I18n ns={[...]}> with a render-prop function child."""

    def test_catalogs(self, scenario_config: ExtractorConfig, storage: MemoryStorage) -> None:
        render = arrow(
            element(
                "div",
                element("h1", expr(call("t", s("keyFromDefault")))),
                _p(call("t", s("anotherNamespace:key.from.another.namespace"), obj())),
            ),
            "t",
        )
        component = element("I18n", expr(render), ns=arr(s("react"), s("anotherNamespace")))
        source = program(imports("I18n"), OpaqueNode("FunctionDeclaration", (component,)))

        MessageExtractor(scenario_config).extract(source, "render-props/actual.js")

        for locale in ("en", "fr"):
            assert _read(storage, locale, "react") == {"keyFromDefault": ""}
            assert _read(storage, locale, "anotherNamespace") == {
                "key": {"from": {"another": {"namespace": ""}}}
            }
