from typing import Dict, Any, List, Mapping, Iterable, Union, Callable, Hashable
from types import MappingProxyType

TICKET_PRICE = 25
ACCEPTED_BILLS = (25, 50, 100)


def shallow_copy(obj: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a new dict with the same top-level entries; nested values are shared."""
    return dict(obj)

def merge_objects(objects: Iterable[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Merge a sequence of mappings into one dict, summing values of overlapping keys.

    Args:
        objects: Mappings to merge, in order

    Returns:
        New dict; the inputs are not modified
    """
    merged: Dict[str, Any] = {}
    for obj in objects:
        for key, value in obj.items():
            if key in merged:
                merged[key] = merged[key] + value
            else:
                merged[key] = value
    return merged

def remove_properties(obj: Mapping[str, Any], keys: Union[str, List[str]]) -> Dict[str, Any]:
    """Return a copy of ``obj`` without ``keys`` (a single key or a list). Missing keys are ignored."""
    if not isinstance(keys, (list, tuple, set)):
        keys = [keys]

    result = dict(obj)
    for key in keys:
        result.pop(key, None)
    return result

def compare_objects(obj1: Mapping[str, Any], obj2: Mapping[str, Any]) -> bool:
    """
    Compare two flat mappings key by key.

    Values compare strictly: True differs from 1, while 1 and 1.0 are the same number.
    """
    if len(obj1) != len(obj2):
        return False
    return all(key in obj2 and _strict_equal(obj1[key], obj2[key]) for key in obj1)

def _strict_equal(a: Any, b: Any) -> bool:
    numbers = (int, float)
    if isinstance(a, numbers) and isinstance(b, numbers) and not isinstance(a, bool) and not isinstance(b, bool):
        return a == b
    return type(a) is type(b) and a == b

def is_empty_object(obj: Mapping[str, Any]) -> bool:
    return len(obj) == 0

def make_immutable(obj: Mapping[str, Any]) -> Mapping[str, Any]:
    """
    Return a read-only view of a copy of ``obj``.

    Item assignment and deletion on the result raise TypeError.
    """
    return MappingProxyType(dict(obj))

def make_word(letters: Mapping[str, Iterable[int]]) -> str:
    """
    Build a word from letters mapped to their positions.

    Negative positions are ignored.

    Example:
        make_word({"a": [0, 1], "b": [2, 3]}) -> "aabb"
    """
    placed: Dict[int, str] = {}
    for letter, positions in letters.items():
        for position in positions:
            if position >= 0:
                placed[position] = letter
    return "".join(placed[position] for position in sorted(placed))

def sell_tickets(queue: Iterable[int]) -> bool:
    """
    Check whether a seller with no starting change can serve the whole queue.

    Each customer buys one ticket at TICKET_PRICE and pays with a single bill.
    A 100 is changed with 50 + 25 when possible, otherwise with three 25s.

    Args:
        queue: Bills in the order customers pay

    Returns:
        True if every customer gets correct change, False otherwise
    """
    count_25 = 0
    count_50 = 0

    for bill in queue:
        if bill not in ACCEPTED_BILLS:
            # Unknown bills are taken as-is and never used for change.
            continue
        if bill == TICKET_PRICE:
            count_25 += 1
        elif bill == 50:
            if not count_25:
                return False
            count_25 -= 1
            count_50 += 1
        elif bill == 100:
            if count_50 and count_25:
                count_50 -= 1
                count_25 -= 1
            elif count_25 >= 3:
                count_25 -= 3
            else:
                return False
    return True

def sort_cities_array(arr: List[Dict[str, str]]) -> List[Dict[str, str]]:
    """Sort records in place by country, then city, and return the same list."""
    arr.sort(key=lambda item: (
        item["country"].casefold(), item["country"],
        item["city"].casefold(), item["city"],
    ))
    return arr

def group(
    items: Iterable[Any],
    key_selector: Callable[[Any], Hashable],
    value_selector: Callable[[Any], Any]
) -> Dict[Hashable, List[Any]]:
    """
    Group items into a multimap.

    Args:
        items: Items to group
        key_selector: Extracts the grouping key from an item
        value_selector: Extracts the stored value from an item

    Returns:
        Dict keyed in first-seen order, each key mapped to its values in input order
    """
    grouped: Dict[Hashable, List[Any]] = {}
    for item in items:
        grouped.setdefault(key_selector(item), []).append(value_selector(item))
    return grouped
