from typing import Any, ClassVar, FrozenSet, Tuple
from collections import Counter
from dataclasses import dataclass
import logging

from .fragments import FragmentKind, SelectorFragment
from .exceptions import DuplicateSingletonSelector, OutOfOrderSelector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selector:
    """
    An immutable compound selector such as ``div#main.container:hover``.

    Every builder method returns a new Selector with one more fragment;
    the receiver is left untouched, so several chains can branch from the
    same value.
    """

    fragments: Tuple[SelectorFragment, ...] = ()

    SINGLETON_KINDS: ClassVar[FrozenSet[FragmentKind]] = frozenset(
        {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
    )

    def element(self, value: str) -> "Selector":
        return self._append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> "Selector":
        return self._append(FragmentKind.ID, value)

    def class_(self, value: str) -> "Selector":
        return self._append(FragmentKind.CLASS, value)

    def attribute(self, value: str) -> "Selector":
        return self._append(FragmentKind.ATTRIBUTE, value)

    attr = attribute

    def pseudo_class(self, value: str) -> "Selector":
        return self._append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> "Selector":
        return self._append(FragmentKind.PSEUDO_ELEMENT, value)

    def stringify(self) -> str:
        return "".join(fragment.text for fragment in self.fragments)

    def __str__(self) -> str:
        return self.stringify()

    def _append(self, kind: FragmentKind, value: str) -> "Selector":
        """
        Return a new Selector with one fragment of ``kind`` appended.

        Raises:
            DuplicateSingletonSelector: If ``kind`` is a singleton already present
            OutOfOrderSelector: If the new fragment ranks below its predecessor
        """
        if kind in self.SINGLETON_KINDS:
            tally = Counter(fragment.kind for fragment in self.fragments)
            if tally[kind]:
                logger.debug(f"Rejected duplicate {kind.label} {value!r} in {self.stringify()!r}")
                raise DuplicateSingletonSelector(kind)

        fragments = self.fragments + (SelectorFragment.from_value(kind, value),)
        _check_order(fragments)
        return Selector(fragments)


def _check_order(fragments: Tuple[SelectorFragment, ...]) -> None:
    previous = None
    for fragment in fragments:
        if previous is not None and fragment.rank < previous.rank:
            logger.debug(f"Rejected {fragment.kind.label} {fragment.text!r} after {previous.kind.label}")
            raise OutOfOrderSelector(fragment.kind, previous.kind)
        previous = fragment


@dataclass(frozen=True)
class CombinedSelector:
    """Two stringifiable selectors joined by a combinator (' ', '+', '~', '>')."""

    left: Any
    combinator: str
    right: Any

    def stringify(self) -> str:
        # The combinator is always padded, so ' ' renders as three spaces.
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"

    def __str__(self) -> str:
        return self.stringify()


def combine(left: Any, combinator: str, right: Any) -> CombinedSelector:
    """
    Join two selectors with a combinator.

    Args:
        left: Selector or CombinedSelector on the left of the combinator
        combinator: Combinator token, used verbatim
        right: Selector or CombinedSelector on the right of the combinator

    Returns:
        CombinedSelector whose stringify() renders ``left combinator right``

    Raises:
        TypeError: If either operand has no stringify() method
    """
    for operand in (left, right):
        if not callable(getattr(operand, "stringify", None)):
            raise TypeError(f"Cannot combine {type(operand).__name__}: no stringify() method")
    return CombinedSelector(left, combinator, right)


class SelectorBuilder:
    """Entry point for building selectors; holds no state of its own."""

    def __init__(self):
        self.root = Selector()

    def element(self, value: str) -> Selector:
        return self.root.element(value)

    def id(self, value: str) -> Selector:
        return self.root.id(value)

    def class_(self, value: str) -> Selector:
        return self.root.class_(value)

    def attribute(self, value: str) -> Selector:
        return self.root.attribute(value)

    attr = attribute

    def pseudo_class(self, value: str) -> Selector:
        return self.root.pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return self.root.pseudo_element(value)

    def combine(self, left: Any, combinator: str, right: Any) -> CombinedSelector:
        return combine(left, combinator, right)


css_selector_builder = SelectorBuilder()
