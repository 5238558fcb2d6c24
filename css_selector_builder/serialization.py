from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, TypeVar, Union
from pathlib import Path
import json
import logging

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .builder import combine
from .exceptions import ParseError
from .selector import SelectorExpression
from .utils import is_valid_file_path, load_json_data

logger = logging.getLogger(__name__)

T = TypeVar("T")

class CompoundSelectorDefinition(BaseModel):
    model_config = ConfigDict(extra="forbid")

    element: Optional[str] = None
    id: Optional[str] = None
    classes: List[str] = Field(default_factory=list)
    attributes: List[str] = Field(default_factory=list)
    pseudo_classes: List[str] = Field(default_factory=list)
    pseudo_element: Optional[str] = None

    def specificity(self) -> Tuple[int, int, int]:
        """Return (id_count, class_count, element_count) of the definition."""
        return (
            1 if self.id else 0,
            len(self.classes) + len(self.attributes) + len(self.pseudo_classes),
            (1 if self.element else 0) + (1 if self.pseudo_element else 0),
        )

class CombinedSelectorDefinition(BaseModel):
    model_config = ConfigDict(extra="forbid")

    left: "SelectorDefinition"
    combinator: str = " "
    right: "SelectorDefinition"

    def specificity(self) -> Tuple[int, int, int]:
        left, right = self.left.specificity(), self.right.specificity()
        return tuple(a + b for a, b in zip(left, right))

SelectorDefinition = Union[CombinedSelectorDefinition, CompoundSelectorDefinition]

CombinedSelectorDefinition.model_rebuild()

def from_json(model_type: Type[T], payload: Union[str, bytes, Mapping[str, Any]]) -> T:
    """
    Construct a validated instance of ``model_type`` from JSON data.

    Args:
        model_type: Target type, a pydantic model or a union of models
        payload: JSON text, or already decoded JSON data

    Returns:
        Instance of the target type

    Raises:
        ParseError: If the payload is not valid JSON or does not fit the type
    """
    adapter = TypeAdapter(model_type)
    try:
        if isinstance(payload, (str, bytes)):
            return adapter.validate_json(payload)
        return adapter.validate_python(payload)
    except ValidationError as e:
        logger.debug(f"Rejected selector definition: {str(e)}")
        raise ParseError(f"Invalid selector definition: {str(e)}")

def build_expression(definition: SelectorDefinition) -> SelectorExpression:
    """Drive a builder through the parts of a definition in canonical order."""
    if isinstance(definition, CombinedSelectorDefinition):
        return combine(
            build_expression(definition.left),
            definition.combinator,
            build_expression(definition.right)
        )

    expression = SelectorExpression()
    if definition.element:
        expression.element(definition.element)
    if definition.id:
        expression.id(definition.id)
    for name in definition.classes:
        expression.class_(name)
    for clause in definition.attributes:
        expression.attr(clause)
    for name in definition.pseudo_classes:
        expression.pseudo_class(name)
    if definition.pseudo_element:
        expression.pseudo_element(definition.pseudo_element)
    return expression

def build_selector(definition: SelectorDefinition) -> str:
    return build_expression(definition).render()

def build_selectors(definitions: Mapping[str, Any]) -> Dict[str, str]:
    """
    Build a named set of selectors.

    Args:
        definitions: Mapping of field name to definition model or raw dict

    Returns:
        Mapping of field name to rendered selector
    """
    built = {}
    for field, definition in definitions.items():
        if not isinstance(definition, BaseModel):
            definition = from_json(SelectorDefinition, definition)
        built[field] = build_selector(definition)
    return built

def parse_json_string(json_string: str) -> str:
    """Build the selector described by a JSON definition string."""
    return build_selector(from_json(SelectorDefinition, json_string))

def parse_json_file(file_path: Union[str, Path]) -> str:
    """Build the selector described by a JSON definition file."""
    if not is_valid_file_path(file_path):
        raise ParseError(f"Invalid or non-existent file: {file_path}")
    data = load_json_data(file_path)
    return build_selector(from_json(SelectorDefinition, data))

def to_json(definition: SelectorDefinition, indent: Optional[int] = None) -> str:
    return definition.model_dump_json(exclude_defaults=True, indent=indent)

def selectors_to_json(selectors: Mapping[str, Union[str, SelectorExpression]]) -> str:
    """
    Serialize named selectors to a JSON object.

    Expressions are rendered first, which resets them.
    """
    rendered = {
        field: value.render() if isinstance(value, SelectorExpression) else value
        for field, value in selectors.items()
    }
    return json.dumps(rendered)
