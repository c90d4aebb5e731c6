"""Quickstart example for i18nextract.

Extracts messages from a component tree into per-locale JSON catalogs.

The component trees below are what @babel/parser produces for:

    import { translate, Trans } from 'react-i18next';

    function Greeting({ t, name }) {
      return (
        <div>
          <h1>{t('title', 'Welcome')}</h1>
          <Trans i18nKey="intro">Hello <strong>{{ name }}</strong></Trans>
          <p>{t('common:items', { defaultValue: 'One item', count: 1 })}</p>
        </div>
      );
    }

    export default translate(['app', 'common'])(Greeting);

Run it from the repository root; catalogs are written to a temporary
directory.
"""

import json
import tempfile
from pathlib import Path

from i18nextract import (
    ExtractionError,
    ExtractorConfig,
    FileSystemStorage,
    MemoryStorage,
    MessageExtractor,
    from_estree,
)


def ident(name, kind="Identifier"):
    return {"type": kind, "name": name}


def literal(value):
    return {"type": "Literal", "value": value}


def t_call(*arguments):
    return {"type": "CallExpression", "callee": ident("t"), "arguments": list(arguments)}


def jsx(name, children=(), attributes=()):
    return {
        "type": "JSXElement",
        "openingElement": {
            "type": "JSXOpeningElement",
            "name": ident(name, "JSXIdentifier"),
            "attributes": list(attributes),
            "selfClosing": not children,
        },
        "children": list(children),
    }


def container(expression):
    return {"type": "JSXExpressionContainer", "expression": expression}


def prop(name, value):
    return {"type": "Property", "kind": "init", "key": ident(name), "value": value}


GREETING = {
    "type": "Program",
    "body": [
        {
            "type": "ImportDeclaration",
            "source": literal("react-i18next"),
            "specifiers": [
                {"type": "ImportSpecifier", "imported": ident("translate"), "local": ident("translate")},
                {"type": "ImportSpecifier", "imported": ident("Trans"), "local": ident("Trans")},
            ],
        },
        {
            "type": "FunctionDeclaration",
            "id": ident("Greeting"),
            "body": {
                "type": "ReturnStatement",
                "argument": jsx("div", [
                    jsx("h1", [container(t_call(literal("title"), literal("Welcome")))]),
                    jsx(
                        "Trans",
                        [
                            {"type": "JSXText", "value": "Hello "},
                            jsx("strong", [
                                container({
                                    "type": "ObjectExpression",
                                    "properties": [prop("name", ident("name"))],
                                }),
                            ]),
                        ],
                        [{"type": "JSXAttribute", "name": ident("i18nKey", "JSXIdentifier"), "value": literal("intro")}],
                    ),
                    jsx("p", [
                        container(t_call(
                            literal("common:items"),
                            {
                                "type": "ObjectExpression",
                                "properties": [
                                    prop("defaultValue", literal("One item")),
                                    prop("count", literal(1)),
                                ],
                            },
                        )),
                    ]),
                ]),
            },
        },
        {
            "type": "ExportDefaultDeclaration",
            "declaration": {
                "type": "CallExpression",
                "callee": {
                    "type": "CallExpression",
                    "callee": ident("translate"),
                    "arguments": [{"type": "ArrayExpression", "elements": [literal("app"), literal("common")]}],
                },
                "arguments": [ident("Greeting")],
            },
        },
    ],
}

# Example 1: Extract to disk
print("=" * 50)
print("Example 1: Extract to Disk")
print("=" * 50)

with tempfile.TemporaryDirectory() as root:
    config = ExtractorConfig(locales=("en", "fr"), storage=FileSystemStorage(root))
    result = MessageExtractor(config).extract(from_estree(GREETING), "src/Greeting.jsx")

    for write in result.writes:
        print(f"{write.status:>9}  {Path(write.path).relative_to(root)}")
    print((Path(root) / "locales" / "en" / "app.json").read_text(encoding="utf-8"))
    # Output:
    # {
    #   "title": "Welcome",
    #   "intro": "Hello <0><0>{{name}}</0></0>"
    # }

    # Translations survive re-extraction
    fr_app = Path(root) / "locales" / "fr" / "app.json"
    fr_app.write_text(json.dumps({"title": "Bienvenue"}, indent=2), encoding="utf-8")
    MessageExtractor(config).extract(from_estree(GREETING), "src/Greeting.jsx")
    print(fr_app.read_text(encoding="utf-8"))
    # Output:
    # {
    #   "title": "Bienvenue",
    #   "intro": "Hello <0><0>{{name}}</0></0>"
    # }

# Example 2: Dry run in memory
print("\n" + "=" * 50)
print("Example 2: Dry Run")
print("=" * 50)

storage = MemoryStorage()
config = ExtractorConfig.from_mapping({"locales": ["en"], "fs": storage})
result = MessageExtractor(config).extract(from_estree(GREETING), "src/Greeting.jsx")
print(json.dumps(result.catalog, indent=2))
print(sorted(storage.files))
# Output: ['locales/en/app.json', 'locales/en/common.json']

# Example 3: Errors point at the source
print("\n" + "=" * 50)
print("Example 3: Diagnostics")
print("=" * 50)

broken = {
    "type": "Program",
    "body": [{"type": "ExpressionStatement", "expression": t_call(ident("someVariable"))}],
}
try:
    MessageExtractor(config).extract(from_estree(broken), "src/Broken.jsx")
except ExtractionError as e:
    print(e)
    # Output:
    # error[NON_STATIC_EXPRESSION]: Value of 'key' must be statically determinable for extraction
    #   = help: Use a string literal or a concatenation of string literals

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
