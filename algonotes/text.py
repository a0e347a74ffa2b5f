"""Text processing: tag attribute parsing, infix conversion and string hashing."""

from __future__ import annotations

import re
from collections.abc import Iterable

MOD = 1_000_000_007
HASH_BASE = 31

_ATTRIBUTE = re.compile(r"([^\s=]+)\s*=\s*(\S+)")


def parse_attributes(lines: Iterable[str]) -> dict[str, str]:
    """Map "outer.inner~attribute" to value for every attribute in tag lines.

    Each line opens a tag such as <tag name = "value"> or closes one with
    </tag>. Keys are returned in sorted order.
    """
    attributes: dict[str, str] = {}
    tags: list[str] = []
    for line in lines:
        cleaned = line.replace('"', "").replace(">", "").strip()
        if not cleaned:
            continue
        if not cleaned.startswith("<"):
            raise ValueError(f"not a tag: {line!r}")
        if cleaned.startswith("</"):
            if not tags:
                raise ValueError(f"closing tag without an open tag: {line!r}")
            tags.pop()
            continue
        parts = cleaned[1:].split(maxsplit=1)
        if not parts:
            raise ValueError(f"tag without a name: {line!r}")
        name = parts[0]
        rest = parts[1] if len(parts) > 1 else ""
        path = f"{tags[-1]}.{name}" if tags else name
        tags.append(path)
        for attribute, value in _ATTRIBUTE.findall(rest):
            attributes[f"{path}~{attribute}"] = value
    return dict(sorted(attributes.items()))


def precedence(operator: str) -> int:
    """Binding strength of an operator; -1 for anything else."""
    if operator == "^":
        return 3
    if operator in ("*", "/"):
        return 2
    if operator in ("+", "-"):
        return 1
    return -1


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Operators of equal precedence, '^' included, associate to the left.
    Whitespace is ignored; unbalanced parentheses raise ValueError.
    """
    stack: list[str] = []
    output: list[str] = []
    for ch in expression:
        if ch.isspace():
            continue
        if ch.isalnum():
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unbalanced ')' in expression")
            stack.pop()
        else:
            while stack and precedence(ch) <= precedence(stack[-1]):
                output.append(stack.pop())
            stack.append(ch)
    while stack:
        top = stack.pop()
        if top == "(":
            raise ValueError("unbalanced '(' in expression")
        output.append(top)
    return "".join(output)


def polynomial_hash(text: str) -> int:
    """Polynomial rolling hash with letters a..z weighted 1..26, base 31, modulo MOD."""
    value = 0
    power = 1
    for ch in text:
        value = (value + (ord(ch) - ord("a") + 1) * power) % MOD
        power = power * HASH_BASE % MOD
    return value