# css_selector_builder/__init__.py
from .fragments import FragmentKind, SelectorFragment
from .builder import Selector, CombinedSelector, SelectorBuilder, combine, css_selector_builder
from .exceptions import (
    ValidationError,
    ParseError,
    SerializationError,
    InvalidSelectorError,
    DuplicateSingletonSelector,
    OutOfOrderSelector
)
from .serialization import Rectangle, get_json, from_json
from .utils import (
    shallow_copy,
    merge_objects,
    remove_properties,
    compare_objects,
    is_empty_object,
    make_immutable,
    make_word,
    sell_tickets,
    sort_cities_array,
    group
)

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "Selector",
    "CombinedSelector",
    "SelectorBuilder",
    "FragmentKind",
    "SelectorFragment",
    "Rectangle",
    "combine",
    "css_selector_builder",

    # Exceptions
    "ValidationError",
    "ParseError",
    "SerializationError",
    "InvalidSelectorError",
    "DuplicateSingletonSelector",
    "OutOfOrderSelector",

    # Utility functions
    "shallow_copy",
    "merge_objects",
    "remove_properties",
    "compare_objects",
    "is_empty_object",
    "make_immutable",
    "make_word",
    "sell_tickets",
    "sort_cities_array",
    "group",
    "get_json",
    "from_json"
]
