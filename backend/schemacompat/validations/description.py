"""Compatibility rule for the ``description`` facet."""

from dataclasses import dataclass

from .diff import PropertyDiff, Verdict, is_handled, reset_fields

_reset = reset_fields("description")


@dataclass(frozen=True)
class DescriptionValidation:
    """Accepts every description change; documentation never breaks clients."""

    def name(self) -> str:
        return "Description"

    def validate(self, diff: PropertyDiff) -> Verdict:
        return is_handled(diff, _reset), None
