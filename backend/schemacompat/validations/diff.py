"""Property diffs and the contract shared by all compatibility rules.

A PropertyDiff pairs the old and new snapshot of one field. Every rule
consumes a diff and returns a verdict ``(handled, error)``:

* ``handled`` is True when the facet the rule governs is the only thing
  that may differ between the two snapshots, so the rule's judgment fully
  accounts for the diff (whether it accepted or rejected the change).
* ``error`` is set when the change is judged incompatible.

``handled`` is computed with a counterfactual: reset the governed facets
on both sides and check whether the remaining snapshots are equal.
"""

from collections.abc import Callable
from dataclasses import MISSING, dataclass, fields, replace
import json
from typing import Any, Protocol

from ..core.schema import Property

_PROPERTY_FIELDS = {f.name: f for f in fields(Property)}


@dataclass(frozen=True)
class CompatibilityError:
    """An incompatible change detected by a rule.

    The message identifies the facet and the old and new values involved.
    """

    validation: str
    message: str
    field: str | None = None

    def __str__(self) -> str:
        """Return a formatted string representation of the error."""
        parts = [f"{self.validation}: {self.message}"]
        if self.field:
            parts.append(f"(field: {self.field})")
        return " ".join(parts)


Verdict = tuple[bool, CompatibilityError | None]


class PropertyDiff:
    """Old and new snapshot of the same field across two schema versions."""

    __slots__ = ("_new", "_old")

    def __init__(self, old: Property, new: Property):
        if old is None or new is None:
            raise ValueError("PropertyDiff requires both an old and a new property")
        self._old = old
        self._new = new

    @property
    def old(self) -> Property:
        return self._old

    @property
    def new(self) -> Property:
        return self._new

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PropertyDiff):
            return NotImplemented
        return self._old == other._old and self._new == other._new

    def __repr__(self) -> str:
        return f"PropertyDiff(old={self._old!r}, new={self._new!r})"


class PropertyValidation(Protocol):
    """Capability implemented by every property compatibility rule."""

    def name(self) -> str:
        """Stable identifier used in diagnostics."""
        ...

    def validate(self, diff: PropertyDiff) -> Verdict:
        """Judge the diff and report whether the judgment covers all of it."""
        ...


ResetFunc = Callable[[PropertyDiff], PropertyDiff]


def reset_fields(*names: str) -> ResetFunc:
    """Build a reset that empties the named facets on both sides of a diff.

    Args:
        *names: Property attribute names (e.g. ``"default"``, ``"enum"``)

    Returns:
        Function producing a new diff with those facets set to their empty
        value. The snapshots of the input diff are left untouched.

    Raises:
        ValueError: If a name is not a Property facet
    """
    unknown = [name for name in names if name not in _PROPERTY_FIELDS]
    if unknown:
        raise ValueError(f"Unknown property facets: {', '.join(unknown)}")

    def reset(diff: PropertyDiff) -> PropertyDiff:
        empty = {name: _empty_value(name) for name in names}
        return PropertyDiff(replace(diff.old, **empty), replace(diff.new, **empty))

    return reset


def is_handled(diff: PropertyDiff, reset: ResetFunc) -> bool:
    """Check whether nothing but the reset facets differs in the diff."""
    counterfactual = reset(diff)
    return counterfactual.old == counterfactual.new


def _empty_value(name: str) -> Any:
    definition = _PROPERTY_FIELDS[name]
    if definition.default_factory is not MISSING:
        return definition.default_factory()
    return definition.default


def join_messages(messages: list[str]) -> str | None:
    """Combine several condition messages into one, one per line."""
    if not messages:
        return None
    return "\n".join(messages)


def quote(value: object) -> str:
    """Render a value as a double-quoted, escaped string."""
    return json.dumps(str(value))


def format_values(values: list[str]) -> str:
    """Render a list of literal values as ``[a, b]``."""
    return "[" + ", ".join(values) + "]"
