"""Custom pylint rules for project typing and JSON decoding policy."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from astroid import nodes
from pylint.checkers import BaseChecker
from pylint.lint import PyLinter


_MESSAGE_PREFER_OPTIONAL = "prefer-optional"
_MESSAGE_NO_OBJECT_ANNOTATION = "no-object-annotation"
_MESSAGE_DIRECT_JSON_PARSE = "direct-json-parse"

_JSON_PARSE_FUNCTIONS = frozenset({"load", "loads"})
_DECODER_MODULE = "json_text_decoder.decoder"


class ProjectRulesChecker(BaseChecker):
    """Project-specific AST checks."""

    name = "project-rules"

    msgs = {
        "C9501": (
            "Use Optional[T] instead of T | None in annotations",
            _MESSAGE_PREFER_OPTIONAL,
            "Project style requires Optional[T] for nullable annotations.",
        ),
        "C9502": (
            "Avoid object in type annotations; use a more specific type",
            _MESSAGE_NO_OBJECT_ANNOTATION,
            "Project style avoids object annotations when a JSON alias fits.",
        ),
        "W9503": (
            "Call to json.%s bypasses json_text_decoder; use decode_value/decode_object/decode_array",
            _MESSAGE_DIRECT_JSON_PARSE,
            "JSON text must be parsed through the decoder so errors stay typed.",
        ),
    }

    def visit_annassign(self, node: nodes.AnnAssign) -> None:
        """Validate annotation style for annotated assignments."""
        self._check_annotation(node.annotation)

    def visit_arguments(self, node: nodes.Arguments) -> None:
        """Validate annotation style for function arguments."""
        for annotation in _argument_annotations(node):
            self._check_annotation(annotation)

    def visit_functiondef(self, node: nodes.FunctionDef) -> None:
        """Validate annotation style for function return type."""
        if node.returns is not None:
            self._check_annotation(node.returns)

    visit_asyncfunctiondef = visit_functiondef

    def visit_call(self, node: nodes.Call) -> None:
        """Flag JSON parsing that does not go through the decoder module."""
        if _is_decoder_module(node.root().name):
            return
        function_name = _json_parse_function(node.func)
        if function_name is not None:
            self.add_message(_MESSAGE_DIRECT_JSON_PARSE, node=node, args=(function_name,))

    def _check_annotation(self, annotation: nodes.NodeNG) -> None:
        for candidate in annotation.nodes_of_class(nodes.BinOp):
            if candidate.op == "|" and (
                _is_none_literal(candidate.left) or _is_none_literal(candidate.right)
            ):
                self.add_message(_MESSAGE_PREFER_OPTIONAL, node=candidate)
        for candidate in annotation.nodes_of_class(nodes.Name):
            if candidate.name == "object":
                self.add_message(_MESSAGE_NO_OBJECT_ANNOTATION, node=candidate)


def _argument_annotations(arguments: nodes.Arguments) -> Iterable[nodes.NodeNG]:
    grouped = (
        arguments.posonlyargs_annotations,
        arguments.annotations,
        arguments.kwonlyargs_annotations,
        [arguments.varargannotation, arguments.kwargannotation],
    )
    for group in grouped:
        for annotation in group:
            if annotation is not None:
                yield annotation


def _json_parse_function(func: nodes.NodeNG) -> Optional[str]:
    """Return the json function name a call target refers to, if any."""
    if isinstance(func, nodes.Attribute):
        if (
            func.attrname in _JSON_PARSE_FUNCTIONS
            and isinstance(func.expr, nodes.Name)
            and func.expr.name == "json"
        ):
            return func.attrname
        return None
    if isinstance(func, nodes.Name):
        _, assignments = func.lookup(func.name)
        for assignment in assignments:
            if not isinstance(assignment, nodes.ImportFrom) or assignment.modname != "json":
                continue
            for imported, alias in assignment.names:
                if (alias or imported) == func.name and imported in _JSON_PARSE_FUNCTIONS:
                    return imported
    return None


def _is_decoder_module(module_name: str) -> bool:
    return module_name == _DECODER_MODULE or module_name.endswith(f".{_DECODER_MODULE}")


def _is_none_literal(node: nodes.NodeNG) -> bool:
    return isinstance(node, nodes.Const) and node.value is None


def register(linter: PyLinter) -> None:
    """Register checker."""
    linter.register_checker(ProjectRulesChecker(linter))
