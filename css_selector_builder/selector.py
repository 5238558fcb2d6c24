from enum import Enum
from typing import Dict, FrozenSet, List, Optional
import logging

from .exceptions import OrderViolationError, DuplicatePartError

logger = logging.getLogger(__name__)

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)

# descendant, adjacent sibling, general sibling, child
COMBINATORS = (" ", "+", "~", ">")

class PartKind(Enum):
    ELEMENT = "element"
    ID = "id"
    CLASS = "classes"
    ATTRIBUTE = "attributes"
    PSEUDO_CLASS = "pseudo_classes"
    PSEUDO_ELEMENT = "pseudo_element"

    @property
    def rank(self) -> int:
        return PART_RANKS[self]

    @property
    def is_singleton(self) -> bool:
        return self in SINGLETON_PARTS

PART_RANKS: Dict[PartKind, int] = {kind: rank for rank, kind in enumerate(PartKind)}

SINGLETON_PARTS: FrozenSet[PartKind] = frozenset({
    PartKind.ELEMENT,
    PartKind.ID,
    PartKind.PSEUDO_ELEMENT,
})

class SimpleSelector:
    """Accumulates the parts of one compound selector."""

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self.element: Optional[str] = None
        self.id: Optional[str] = None
        self.classes: List[str] = []
        self.attributes: List[str] = []
        self.pseudo_classes: List[str] = []
        self.pseudo_element: Optional[str] = None

    def render(self) -> str:
        """
        Render the parts in canonical order and clear the accumulator.

        Returns:
            The compound selector, e.g. ``a#nav.item[href]:hover::after``.
            An empty accumulator renders as an empty string.
        """
        result = ""
        if self.element:
            result += self.element
        if self.id:
            result += f"#{self.id}"
        result += "".join(f".{name}" for name in self.classes)
        result += "".join(f"[{clause}]" for clause in self.attributes)
        result += "".join(f":{name}" for name in self.pseudo_classes)
        if self.pseudo_element:
            result += f"::{self.pseudo_element}"

        self.reset()
        return result

class SelectorExpression:
    """
    Fluent builder for a compound selector or a combination of two selectors.

    Parts must be added in the order element, id, class, attribute,
    pseudo-class, pseudo-element. Element, id and pseudo-element may appear
    once. A rejected call discards everything accumulated so far.
    """

    def __init__(self):
        self.rank = -1
        self.current = SimpleSelector()
        self.combined: Optional[str] = None

    def __repr__(self) -> str:
        if self.combined is not None:
            return f"SelectorExpression(combined={self.combined!r})"
        return f"SelectorExpression(rank={self.rank})"

    def add_part(self, kind: PartKind, value: str) -> "SelectorExpression":
        """
        Add one part to the compound selector under construction.

        Args:
            kind: Which part group the value belongs to
            value: Opaque part text, without its ``#``/``.``/``[]``/``:`` syntax

        Returns:
            This expression, for chaining

        Raises:
            OrderViolationError: If ``kind`` ranks below a part already added
            DuplicatePartError: If a singleton part is supplied a second time
        """
        # A repeated singleton is reported as such even when it is also out of order.
        if kind.is_singleton and getattr(self.current, kind.value):
            logger.debug(f"Rejected second {kind.name} {value!r}")
            self._discard()
            raise DuplicatePartError(DUPLICATE_MESSAGE)

        if self.rank > kind.rank:
            logger.debug(f"Rejected {kind.name} {value!r} after rank {self.rank}")
            self._discard()
            raise OrderViolationError(ORDER_MESSAGE)

        if kind.is_singleton:
            setattr(self.current, kind.value, value)
        else:
            getattr(self.current, kind.value).append(value)

        self.rank = kind.rank
        return self

    def element(self, value: str) -> "SelectorExpression":
        return self.add_part(PartKind.ELEMENT, value)

    def id(self, value: str) -> "SelectorExpression":
        return self.add_part(PartKind.ID, value)

    def class_(self, value: str) -> "SelectorExpression":
        return self.add_part(PartKind.CLASS, value)

    def attr(self, value: str) -> "SelectorExpression":
        return self.add_part(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> "SelectorExpression":
        return self.add_part(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> "SelectorExpression":
        return self.add_part(PartKind.PSEUDO_ELEMENT, value)

    def combine(
        self,
        left: "SelectorExpression",
        combinator: str,
        right: "SelectorExpression"
    ) -> "SelectorExpression":
        """
        Join two expressions with a combinator.

        Both operands are rendered, which resets them. Parts added to this
        expression afterwards are ignored by ``render``.
        """
        self.combined = f"{left.render()} {combinator} {right.render()}"
        return self

    def render(self) -> str:
        """Return the selector text and reset to a fresh builder."""
        if self.combined is not None:
            result = self.combined
        else:
            result = self.current.render()
        self.combined = None
        self._discard()
        return result

    stringify = render

    def _discard(self) -> None:
        self.rank = -1
        self.current = SimpleSelector()
