"""Class-name concatenation and utility-class conflict merging.

class_names() joins conditional class inputs into one string.
merge_classes() additionally drops Tailwind utility classes overridden by a
later class from the same conflict group, so "p-2 p-4" renders as "p-4".
"""

from typing import Iterable, Iterator

from tailwind_merge import TailwindMerge

_MERGER = TailwindMerge()


def _flatten(inputs: Iterable) -> Iterator[str]:
    for item in inputs:
        if not item:
            continue
        if isinstance(item, str):
            yield from item.split()
        elif isinstance(item, dict):
            for name, enabled in item.items():
                if enabled:
                    yield from str(name).split()
        elif isinstance(item, (list, tuple, set, frozenset)):
            yield from _flatten(item)
        else:
            yield from str(item).split()


def class_names(*inputs) -> str:
    """Join class inputs into a single space-separated string.

    Args:
        *inputs: Strings, nested lists/tuples of class inputs, or dicts
            mapping a class name to a condition. Falsy inputs are skipped.

    Returns:
        Class string in call order, e.g. class_names("a", {"b": False}, ["c"])
        returns "a c".
    """
    return " ".join(_flatten(inputs))


def merge_classes(*inputs) -> str:
    """Join class inputs, letting later utilities override earlier ones.

    Two utilities conflict when they belong to the same Tailwind class
    group (both set padding, both set text color, ...) under the same
    variants. Classes that are not Tailwind utilities are always kept.

    Args:
        *inputs: Same inputs accepted by class_names().

    Returns:
        Merged class string, or "" when nothing remains.
    """
    joined = class_names(*inputs)
    if not joined:
        return ""
    return _MERGER.merge(joined)
