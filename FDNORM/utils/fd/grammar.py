"""Lark grammar for functional-dependency lines (`A,B->C,D`).

Attribute names may contain inner spaces and hyphens; surrounding whitespace
is dropped. Empty items between commas are discarded, and an entirely empty
side parses successfully so that the validator can report it by name.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from lark import Lark, Transformer

FD_GRAMMAR = r"""
start: side _ARROW side

side: [NAME] ("," [NAME])*

_ARROW: "->"
NAME: /[^,\-\s>](?:[^,>\n]*[^,\-\s>])?/

%import common.WS_INLINE
%ignore WS_INLINE
"""

FD_SEPARATOR = "->"


class _FDTransformer(Transformer):
    def side(self, items) -> List[str]:
        return [str(item).strip() for item in items if item is not None and str(item).strip()]

    def start(self, items) -> Tuple[List[str], List[str]]:
        lhs, rhs = items
        return lhs, rhs


_PARSER: Optional[Lark] = None


def _get_parser() -> Lark:
    global _PARSER
    if _PARSER is None:
        _PARSER = Lark(
            FD_GRAMMAR,
            parser="lalr",
            lexer="contextual",
            start="start",
            propagate_positions=True,
            maybe_placeholders=False,
        )
    return _PARSER


def parse_fd_expression(text: str) -> Tuple[List[str], List[str]]:
    """
    Parse one FD line into (lhs, rhs) attribute lists, in written order.

    Raises:
        lark.UnexpectedInput: if the line is not a single `lhs->rhs` expression
    """
    tree = _get_parser().parse(text.strip())
    return _FDTransformer().transform(tree)
