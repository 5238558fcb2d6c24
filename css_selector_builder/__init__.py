# css_selector_builder/__init__.py
from .selector import SelectorExpression, SimpleSelector, PartKind, COMBINATORS
from .builder import (
    css_selector_builder,
    element,
    id,
    class_,
    attr,
    pseudo_class,
    pseudo_element,
    combine
)
from .serialization import (
    CompoundSelectorDefinition,
    CombinedSelectorDefinition,
    SelectorDefinition,
    build_expression,
    build_selector,
    build_selectors,
    from_json,
    parse_json_string,
    parse_json_file,
    to_json,
    selectors_to_json
)
from .exceptions import SelectorBuildError, OrderViolationError, DuplicatePartError, ParseError

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "SelectorExpression",
    "SimpleSelector",
    "PartKind",
    "COMBINATORS",

    # Factory
    "css_selector_builder",
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",

    # Definitions
    "CompoundSelectorDefinition",
    "CombinedSelectorDefinition",
    "SelectorDefinition",
    "build_expression",
    "build_selector",
    "build_selectors",
    "from_json",
    "parse_json_string",
    "parse_json_file",
    "to_json",
    "selectors_to_json",

    # Exceptions
    "SelectorBuildError",
    "OrderViolationError",
    "DuplicatePartError",
    "ParseError"
]
