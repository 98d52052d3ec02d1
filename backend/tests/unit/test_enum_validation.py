"""Tests for the Enum compatibility rule."""

import pytest

from schemacompat.core import JSONValue, Property
from schemacompat.validations import (
    EnumAdditionEnforcement,
    EnumRemovalEnforcement,
    EnumValidation,
    PropertyDiff,
)


def _enum(*values: str, **kwargs) -> Property:
    return Property(
        enum=tuple(JSONValue(raw=value.encode()) for value in values), **kwargs
    )


@pytest.mark.parametrize(
    "old, new, rule, message, handled",
    [
        pytest.param(
            _enum("foo"), _enum("foo"), EnumValidation(), None, True, id="no-diff"
        ),
        pytest.param(
            _enum(),
            _enum("foo"),
            EnumValidation(),
            "enum constraints [foo] added when there were no restrictions previously",
            True,
            id="new-constraint",
        ),
        pytest.param(
            _enum(),
            _enum("foo"),
            EnumValidation(addition_enforcement=EnumAdditionEnforcement.NONE),
            None,
            True,
            id="new-constraint-addition-none",
        ),
        pytest.param(
            _enum("foo"),
            _enum("foo", "bar"),
            EnumValidation(
                addition_enforcement=EnumAdditionEnforcement.IF_PREVIOUSLY_CONSTRAINED
            ),
            None,
            True,
            id="value-added-if-previously-constrained",
        ),
        pytest.param(
            _enum("foo"),
            _enum("foo", "bar"),
            EnumValidation(addition_enforcement=EnumAdditionEnforcement.NONE),
            None,
            True,
            id="value-added-addition-none",
        ),
        pytest.param(
            _enum("foo"),
            _enum("foo", "bar"),
            EnumValidation(addition_enforcement=EnumAdditionEnforcement.STRICT),
            "enums [bar] added to the set of allowed values",
            True,
            id="value-added-strict",
        ),
        pytest.param(
            _enum("foo", "bar"),
            _enum("bar"),
            EnumValidation(),
            "enums [foo] removed from the set of previously allowed values",
            True,
            id="value-removed",
        ),
        pytest.param(
            _enum("foo", "bar"),
            _enum("bar"),
            EnumValidation(removal_enforcement=EnumRemovalEnforcement.NONE),
            None,
            True,
            id="value-removed-removal-none",
        ),
        pytest.param(
            _enum(id="foo"),
            _enum(id="bar"),
            EnumValidation(),
            None,
            False,
            id="different-field-changed",
        ),
        pytest.param(
            _enum("foo", id="foo"),
            _enum("foo", id="bar"),
            EnumValidation(),
            None,
            False,
            id="different-field-changed-with-enum",
        ),
    ],
)
def test_enum_validation(old, new, rule, message, handled):
    """Test the enum decision table across enforcement levels."""
    result_handled, error = rule.validate(PropertyDiff(old, new))

    assert result_handled is handled
    if message is None:
        assert error is None
    else:
        assert error is not None
        assert error.validation == "Enum"
        assert error.message == message


class TestEnumValidation:
    """Test enum behaviour beyond the decision table."""

    def test_defaults(self):
        """Test the default enforcement levels."""
        rule = EnumValidation()

        assert rule.name() == "Enum"
        assert rule.addition_enforcement == EnumAdditionEnforcement.IF_PREVIOUSLY_CONSTRAINED
        assert rule.removal_enforcement == EnumRemovalEnforcement.STRICT

    def test_order_is_not_significant(self):
        """Test that reordering enum values is not a change."""
        handled, error = EnumValidation(
            addition_enforcement=EnumAdditionEnforcement.STRICT
        ).validate(PropertyDiff(_enum("foo", "bar"), _enum("bar", "foo")))

        assert handled is True
        assert error is None

    def test_additions_and_removals_reported_together(self):
        """Test that every condition appears in a combined error."""
        rule = EnumValidation(addition_enforcement=EnumAdditionEnforcement.STRICT)

        handled, error = rule.validate(
            PropertyDiff(_enum("foo", "bar"), _enum("bar", "baz"))
        )

        assert handled is True
        assert error is not None
        assert "enums [baz] added to the set of allowed values" in error.message
        assert (
            "enums [foo] removed from the set of previously allowed values"
            in error.message
        )

    def test_reported_values_are_sorted(self):
        """Test deterministic ordering of reported values."""
        handled, error = EnumValidation().validate(
            PropertyDiff(_enum("c", "a", "b"), _enum())
        )

        assert handled is True
        assert error is not None
        assert error.message == (
            "enums [a, b, c] removed from the set of previously allowed values"
        )

    def test_enum_dropped_entirely_is_a_removal(self):
        """Test that dropping the whole constraint removes every value."""
        rule = EnumValidation(removal_enforcement=EnumRemovalEnforcement.NONE)

        handled, error = rule.validate(PropertyDiff(_enum("foo"), _enum()))

        assert handled is True
        assert error is None

    def test_error_reported_even_when_not_handled(self):
        """Test that an incompatible enum change is reported alongside other changes."""
        handled, error = EnumValidation().validate(
            PropertyDiff(_enum("foo", "bar", type="string"), _enum("foo", type="integer"))
        )

        assert handled is False
        assert error is not None
        assert "[bar]" in error.message

    def test_values_from_schema_compare_serialized(self):
        """Test enum values loaded from a schema mapping."""
        old = Property.from_dict({"type": "string", "enum": ["Always", "Never"]})
        new = Property.from_dict({"type": "string", "enum": ["Always"]})

        handled, error = EnumValidation().validate(PropertyDiff(old, new))

        assert handled is True
        assert error is not None
        assert '"Never"' in error.message

    def test_non_utf8_values_render_distinctly(self):
        """Test that different undecodable literals stay distinguishable."""
        old = Property(enum=(JSONValue(raw=b"\xff"), JSONValue(raw=b"\xfe")))

        handled, error = EnumValidation().validate(PropertyDiff(old, Property()))

        assert handled is True
        assert error is not None
        assert error.message == (
            "enums [\\xfe, \\xff] removed from the set of previously allowed values"
        )

    def test_validation_is_idempotent(self):
        """Test that repeated validation yields identical verdicts."""
        rule = EnumValidation()
        diff = PropertyDiff(_enum("foo", "bar"), _enum("bar"))

        assert rule.validate(diff) == rule.validate(diff)
