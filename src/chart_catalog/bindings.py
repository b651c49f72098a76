# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Generate Python typing bindings from the catalog JSON schema.

Objects with declared ``properties`` become :class:`typing.TypedDict`
declarations, free-form objects become ``dict`` aliases, ``enum`` and
``const`` become :data:`typing.Literal` and ``anyOf``/``oneOf`` become unions.
``$ref`` pointers into ``definitions`` or ``$defs`` are emitted once under the
definition's name, so recursive definitions are supported. The output only
depends on the schema, the type name and the banner.
"""

from __future__ import annotations

import keyword
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from .errors import CatalogIntegrityError
from .types import JSONValue

_PRIMITIVES: Final[dict[str, str]] = {
    "string": "str",
    "integer": "int",
    "number": "float",
    "boolean": "bool",
    "null": "None",
}
_REF_PREFIXES: Final[tuple[str, ...]] = ("#/definitions/", "#/$defs/")
_WORD_SPLIT: Final[re.Pattern[str]] = re.compile(r"[^0-9A-Za-z]+")
_PENDING: Final[str] = ""


def pascal_case(value: str) -> str:
    """Return ``value`` as a ``PascalCase`` identifier.

    >>> pascal_case("diffClass")
    'DiffClass'
    >>> pascal_case("song-data")
    'SongData'
    """

    words = [word for word in _WORD_SPLIT.split(value) if word]
    name = "".join(word[0].upper() + word[1:] for word in words)
    if not name:
        return "Anonymous"
    if name[0].isdigit():
        return f"T{name}"
    return name


def _is_attribute_name(key: str) -> bool:
    return key.isidentifier() and not keyword.iskeyword(key)


@dataclass(slots=True)
class _Field:
    key: str
    annotation: str
    required: bool
    description: str | None


@dataclass(slots=True)
class BindingsGenerator:
    """Stateful walker turning one schema into typing declarations."""

    schema: Mapping[str, JSONValue]
    type_name: str
    _declarations: dict[str, str] = field(default_factory=dict, init=False)
    _ref_names: dict[str, str] = field(default_factory=dict, init=False)
    _typing_names: set[str] = field(default_factory=set, init=False)

    def render(self, banner: str) -> str:
        """Return the complete module source for the schema."""

        root_name = pascal_case(self.type_name)
        self._declare(root_name, self.schema, force_typed_dict=True)
        lines: list[str] = []
        if banner.strip():
            lines.extend([banner.strip("\n"), ""])
        lines.extend(["from __future__ import annotations", ""])
        if self._typing_names:
            lines.extend([f"from typing import {', '.join(sorted(self._typing_names))}", ""])
        for declaration in self._declarations.values():
            lines.extend(["", declaration, ""])
        exported = ", ".join(f'"{name}"' for name in self._declarations)
        lines.extend(["", f"__all__ = [{exported}]"])
        return "\n".join(lines) + "\n"

    def _unique_name(self, base: str) -> str:
        candidate = base
        counter = 2
        while candidate in self._declarations:
            candidate = f"{base}{counter}"
            counter += 1
        return candidate

    def _declare(self, name: str, node: Mapping[str, JSONValue], *, force_typed_dict: bool = False) -> str:
        """Reserve ``name`` and emit the declaration for ``node``.

        The slot is reserved before the body is rendered so recursive
        references resolve to the name and the output keeps discovery order.
        """

        self._declarations[name] = _PENDING
        if force_typed_dict or isinstance(node.get("properties"), Mapping):
            self._declarations[name] = self._typed_dict(name, node)
        else:
            expression = self._expression(node, hint=name)
            self._typing_names.add("TypeAlias")
            self._declarations[name] = f"{name}: TypeAlias = {expression!r}"
        return name

    def _resolve_ref(self, ref: str) -> str:
        if ref in self._ref_names:
            return self._ref_names[ref]
        if ref == "#":
            return pascal_case(self.type_name)
        prefix = next((candidate for candidate in _REF_PREFIXES if ref.startswith(candidate)), None)
        if prefix is None:
            raise CatalogIntegrityError(f"unsupported $ref '{ref}': only local definitions can be referenced")
        container = self.schema.get(prefix[2:-1])
        key = ref[len(prefix) :]
        target = container.get(key) if isinstance(container, Mapping) else None
        if not isinstance(target, Mapping):
            raise CatalogIntegrityError(f"unresolvable $ref '{ref}'")
        title = target.get("title")
        name = self._unique_name(pascal_case(title if isinstance(title, str) else key))
        self._ref_names[ref] = name
        return self._declare(name, target)

    def _expression(self, node: JSONValue, *, hint: str) -> str:
        """Return the type expression describing ``node``."""

        if node is True or not isinstance(node, Mapping) or not node:
            self._typing_names.add("Any")
            return "Any"
        ref = node.get("$ref")
        if isinstance(ref, str):
            return self._resolve_ref(ref)
        if "const" in node:
            return self._literal([node["const"]])
        enum = node.get("enum")
        if isinstance(enum, Sequence) and not isinstance(enum, str):
            return self._literal(list(enum))
        for combinator in ("anyOf", "oneOf"):
            branches = node.get(combinator)
            if isinstance(branches, Sequence) and not isinstance(branches, str):
                return self._union(
                    self._expression(branch, hint=f"{hint}{index}") for index, branch in enumerate(branches, 1)
                )
        all_of = node.get("allOf")
        if isinstance(all_of, Sequence) and not isinstance(all_of, str):
            return self._expression(self._merge(all_of), hint=hint)
        kind = node.get("type")
        if isinstance(kind, Sequence) and not isinstance(kind, str):
            return self._union(
                self._expression({**node, "type": entry}, hint=hint) for entry in kind if isinstance(entry, str)
            )
        if kind == "array":
            return self._array(node, hint=hint)
        if kind == "object" or (kind is None and "properties" in node):
            return self._object(node, hint=hint)
        if isinstance(kind, str) and kind in _PRIMITIVES:
            return _PRIMITIVES[kind]
        self._typing_names.add("Any")
        return "Any"

    def _literal(self, values: Sequence[JSONValue]) -> str:
        literals = [value for value in values if value is not None]
        members: list[str] = []
        if literals:
            self._typing_names.add("Literal")
            members.append(f"Literal[{', '.join(_literal_repr(value) for value in literals)}]")
        if len(literals) != len(values):
            members.append("None")
        return " | ".join(members) if members else "None"

    @staticmethod
    def _union(expressions: Iterable[str]) -> str:
        seen: list[str] = []
        for expression in expressions:
            for member in _split_union(expression):
                if member not in seen:
                    seen.append(member)
        return " | ".join(seen)

    @staticmethod
    def _merge(parts: Sequence[JSONValue]) -> Mapping[str, JSONValue]:
        properties: dict[str, JSONValue] = {}
        required: list[str] = []
        merged: dict[str, JSONValue] = {"type": "object"}
        for part in parts:
            if not isinstance(part, Mapping):
                continue
            part_properties = part.get("properties")
            if isinstance(part_properties, Mapping):
                properties.update(part_properties)
            part_required = part.get("required")
            if isinstance(part_required, Sequence) and not isinstance(part_required, str):
                required.extend(entry for entry in part_required if isinstance(entry, str) and entry not in required)
            for key in ("title", "description", "additionalProperties"):
                if key in part:
                    merged[key] = part[key]
        merged["properties"] = properties
        merged["required"] = required
        return merged

    def _array(self, node: Mapping[str, JSONValue], *, hint: str) -> str:
        items = node.get("items")
        if isinstance(items, Sequence) and not isinstance(items, str):
            members = [self._expression(item, hint=f"{hint}Item{index}") for index, item in enumerate(items, 1)]
            return f"tuple[{', '.join(members)}]" if members else "tuple[()]"
        return f"list[{self._expression(items if items is not None else True, hint=f'{hint}Item')}]"

    def _object(self, node: Mapping[str, JSONValue], *, hint: str) -> str:
        if isinstance(node.get("properties"), Mapping):
            title = node.get("title")
            name = self._unique_name(pascal_case(title if isinstance(title, str) else hint))
            return self._declare(name, node)
        extra = node.get("additionalProperties", True)
        if extra is False:
            return "dict[str, None]"
        return f"dict[str, {self._expression(extra, hint=f'{hint}Value')}]"

    def _fields(self, name: str, node: Mapping[str, JSONValue]) -> list[_Field]:
        properties = node.get("properties")
        required_raw = node.get("required")
        required = set(required_raw) if isinstance(required_raw, Sequence) and not isinstance(required_raw, str) else set()
        fields: list[_Field] = []
        if not isinstance(properties, Mapping):
            return fields
        for key, subschema in properties.items():
            annotation = self._expression(subschema, hint=f"{name}{pascal_case(key)}")
            description = subschema.get("description") if isinstance(subschema, Mapping) else None
            fields.append(
                _Field(
                    key=key,
                    annotation=annotation,
                    required=key in required,
                    description=description if isinstance(description, str) else None,
                ),
            )
        return fields

    def _typed_dict(self, name: str, node: Mapping[str, JSONValue]) -> str:
        self._typing_names.add("TypedDict")
        fields = self._fields(name, node)
        if any(not entry.required for entry in fields):
            self._typing_names.add("NotRequired")
        extra = node.get("additionalProperties")
        extra_note = None
        if isinstance(extra, Mapping) and fields:
            described = self._describe(extra)
            extra_note = f"additional keys map to {described}" if described else "additional keys are allowed"
        description = node.get("description")
        if all(_is_attribute_name(entry.key) for entry in fields):
            return _class_declaration(name, fields, description if isinstance(description, str) else None, extra_note)
        return _functional_declaration(name, fields, extra_note)

    def _describe(self, node: Mapping[str, JSONValue]) -> str | None:
        """Name the type of ``node`` for a comment without declaring anything new."""

        ref = node.get("$ref")
        if isinstance(ref, str):
            return self._ref_names.get(ref)
        kind = node.get("type")
        if isinstance(kind, str) and kind in _PRIMITIVES:
            return _PRIMITIVES[kind]
        return None


def _literal_repr(value: JSONValue) -> str:
    if isinstance(value, (str, bool, int)):
        return repr(value)
    raise CatalogIntegrityError(f"cannot express {value!r} as a Literal")


def _split_union(expression: str) -> list[str]:
    """Split a top-level ``a | b`` expression, ignoring bars nested in brackets."""

    members: list[str] = []
    depth = 0
    current: list[str] = []
    for char in expression:
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
        if char == "|" and depth == 0:
            members.append("".join(current).strip())
            current = []
            continue
        current.append(char)
    members.append("".join(current).strip())
    return [member for member in members if member]


def _wrap(entry: _Field) -> str:
    return entry.annotation if entry.required else f"NotRequired[{entry.annotation}]"


def _class_declaration(name: str, fields: Sequence[_Field], description: str | None, extra_note: str | None) -> str:
    lines = [f"class {name}(TypedDict):"]
    body: list[str] = []
    if description:
        body.extend([f'    """{_docstring_text(description)}"""', ""])
    if extra_note:
        body.append(f"    # {extra_note}")
    for entry in fields:
        if entry.description:
            body.append(f"    #: {' '.join(entry.description.split())}")
        body.append(f"    {entry.key}: {_wrap(entry)}")
    if not fields and not description:
        body.append("    pass")
    lines.extend(body)
    return "\n".join(lines).rstrip()


def _functional_declaration(name: str, fields: Sequence[_Field], extra_note: str | None) -> str:
    lines: list[str] = []
    if extra_note:
        lines.append(f"# {name}: {extra_note}")
    lines.append(f"{name} = TypedDict(")
    lines.append(f'    "{name}",')
    lines.append("    {")
    for entry in fields:
        lines.append(f"        {entry.key!r}: {_wrap(entry)!r},")
    lines.append("    },")
    lines.append(")")
    return "\n".join(lines)


def _docstring_text(text: str) -> str:
    return " ".join(text.split()).replace('"""', "'''")


def generate(schema: Mapping[str, JSONValue], type_name: str, banner: str) -> str:
    """Return Python typing bindings for ``schema``.

    Args:
        schema: JSON schema describing catalog documents.
        type_name: Name of the root type.
        banner: Text placed at the very top of the module, typically a
            "generated, do not edit" docstring.

    Returns:
        str: Module source ending with a newline.

    Raises:
        CatalogIntegrityError: If the schema uses references that cannot be resolved locally.
    """

    return BindingsGenerator(schema=schema, type_name=type_name).render(banner)


def write_bindings(path: Path, source: str) -> Path:
    """Write generated ``source`` to ``path``, replacing any previous content."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(source, encoding="utf-8")
    return path


__all__ = ["BindingsGenerator", "generate", "pascal_case", "write_bindings"]
