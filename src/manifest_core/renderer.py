"""Expression renderer: value / condition nodes → strings."""

from __future__ import annotations

import logging
import re
from typing import Union, get_args

from .nodes import Array, BinaryExpression, Concat, String, Undef, ValueNode, Variable

logger = logging.getLogger(__name__)

Value = Union[str, list[str], None]

# A run of quote characters (optionally backslash-escaped) at either end.
_LEADING_QUOTES_RE = re.compile(r"^(?:\\?[\"'])+")
_TRAILING_QUOTES_RE = re.compile(r"(?:\\?[\"'])+$")

_VALUE_TYPES = get_args(ValueNode)


# ---------------------------------------------------------------------------
# Quote handling
# ---------------------------------------------------------------------------

def strip_quotes(text: str) -> str:
    """Remove the enclosing quote layer from both ends of *text*.

    ``"foo"``, ``'foo'`` and ``\\"foo\\"`` all become ``foo``.  A run of
    quote characters counts as one layer, so stripping twice is the same
    as stripping once.
    """
    text = _LEADING_QUOTES_RE.sub("", text)
    return _TRAILING_QUOTES_RE.sub("", text)


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------

def render(node) -> str:
    """Render a single value node to text.

    String literals yield their value as written between the quotes;
    interpolated strings resolve their fragments; every other node uses
    its default text form with the enclosing quotes removed.
    """
    if isinstance(node, String):
        return node.value
    if isinstance(node, Concat):
        return _render_concat(node)
    if not isinstance(node, _VALUE_TYPES):
        logger.debug("rendering %s through its text form", type(node).__name__)
    return strip_quotes(str(node))


def render_list(node: Array) -> list[str]:
    """Render every element of an array node, in order.

    Elements come out quote-stripped, since ``render`` already removes the
    enclosing layer.
    """
    return [render(item) for item in node.items]


def render_value(node) -> Value:
    """Render a parameter or variable value.

    - ``None`` / ``undef`` → ``None``
    - Array → list of strings
    - anything else → string
    """
    if node is None or isinstance(node, Undef):
        return None
    if isinstance(node, Array):
        return render_list(node)
    return render(node)


def _render_concat(node: Concat) -> str:
    parts: list[str] = []
    for frag in node.fragments:
        if isinstance(frag, Variable):
            parts.append("${" + frag.name + "}")
        else:
            parts.append(str(frag))
    return strip_quotes("".join(parts).replace('"', ""))


# ---------------------------------------------------------------------------
# Conditions
# ---------------------------------------------------------------------------

def render_condition(node) -> str:
    """Render an ``if`` condition.

    The left-hand chain of binary / logical operators is unwrapped;
    right operands are emitted through their default text form only.

        (($a == 1) and ($b == 2)) or $c  →  "$a == 1 and $b == 2 or $c"
    """
    if not isinstance(node, BinaryExpression):
        return str(node)

    suffix = ""
    current = node
    while isinstance(current, BinaryExpression):
        suffix = f" {current.operator} {current.right}" + suffix
        current = current.left
    return f"{current}{suffix}"
