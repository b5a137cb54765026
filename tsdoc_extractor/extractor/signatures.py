"""Rendering of call signatures: type parameters, parameters and return type."""

from dataclasses import dataclass

from tsdoc_extractor.extractor.models import ParameterDoc
from tsdoc_extractor.extractor.type_renderer import TypeRenderer
from tsdoc_extractor.semantic import Node


@dataclass(frozen=True)
class Signature:
    parameters: tuple[ParameterDoc, ...]
    type_parameters: tuple[str, ...]
    return_type: str


class SignatureRenderer:
    def __init__(self, types: TypeRenderer) -> None:
        self._types = types

    def render(self, node: Node) -> Signature:
        return Signature(
            parameters=self.parameters(node),
            type_parameters=self.type_parameters(node),
            return_type=self._types.return_type(node),
        )

    @staticmethod
    def type_parameters(node: Node) -> tuple[str, ...]:
        """Source text of each type parameter, constraint included (``U extends Findable<T>``)."""
        return tuple(parameter.text or parameter.name or "" for parameter in node.type_parameters)

    def parameters(self, node: Node) -> tuple[ParameterDoc, ...]:
        return tuple(self.parameter(parameter) for parameter in node.parameters)

    def parameter(self, node: Node) -> ParameterDoc:
        name = node.name or ""
        if node.dot_dot_dot_token:
            name = f"...{name}"
        return ParameterDoc(
            name=name,
            type=self._types.declared_type(node),
            optional=node.question_token or node.initializer is not None,
            default_value=node.initializer,
        )
