from types import SimpleNamespace

from .selector import SelectorExpression

def element(value: str) -> SelectorExpression:
    return SelectorExpression().element(value)

def id(value: str) -> SelectorExpression:
    return SelectorExpression().id(value)

def class_(value: str) -> SelectorExpression:
    return SelectorExpression().class_(value)

def attr(value: str) -> SelectorExpression:
    return SelectorExpression().attr(value)

def pseudo_class(value: str) -> SelectorExpression:
    return SelectorExpression().pseudo_class(value)

def pseudo_element(value: str) -> SelectorExpression:
    return SelectorExpression().pseudo_element(value)

def combine(
    selector1: SelectorExpression,
    combinator: str,
    selector2: SelectorExpression
) -> SelectorExpression:
    """Combine two expressions into a new one, consuming both operands."""
    return SelectorExpression().combine(selector1, combinator, selector2)

# Facade object; ``class`` is only reachable through getattr.
css_selector_builder = SimpleNamespace(
    element=element,
    id=id,
    class_=class_,
    attr=attr,
    pseudo_class=pseudo_class,
    pseudo_element=pseudo_element,
    combine=combine,
)
setattr(css_selector_builder, "class", class_)
