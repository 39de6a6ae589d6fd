"""Tests for composite filters.

Tests:
- all_of: AND composition
- any_of: OR composition, empty-call warning
- invert: NOT operator
"""

import logging

import pytest

from apifilter.domain.exceptions import FilterDefinitionError
from apifilter.infrastructure.filters.composite import all_of, any_of, invert
from apifilter.infrastructure.filters.flags import DEPRECATED
from apifilter.infrastructure.filters.member import has_name, is_member_type
from tests.factories import make_member


class TestAllOf:
    """Tests for all_of (AND) filter composition."""

    def test_all_of_all_pass(self) -> None:
        """all_of passes when all filters pass."""
        flt = all_of(is_member_type("Property"), has_name("Health"))

        assert flt(make_member(name="Health")) is True

    def test_all_of_one_fails(self) -> None:
        """all_of fails when any filter fails."""
        flt = all_of(is_member_type("Property"), has_name("Health"))

        assert flt(make_member(name="MaxHealth")) is False
        assert flt(make_member(member_type="Event")) is False

    def test_all_of_empty(self) -> None:
        """all_of with no filters passes everything."""
        flt = all_of()

        assert flt(make_member()) is True

    def test_all_of_rejects_non_callable(self) -> None:
        with pytest.raises(FilterDefinitionError, match="all_of"):
            all_of(has_name("Health"), "Health")  # type: ignore[arg-type]


class TestAnyOf:
    """Tests for any_of (OR) filter composition."""

    def test_any_of_one_passes(self) -> None:
        """any_of passes when any filter passes."""
        flt = any_of(is_member_type("Event"), is_member_type("Callback"))

        assert flt(make_member(member_type="Event")) is True
        assert flt(make_member(member_type="Callback")) is True

    def test_any_of_none_pass(self) -> None:
        """any_of fails when all filters fail."""
        flt = any_of(is_member_type("Event"), has_name("Died"))

        assert flt(make_member(member_type="Property", name="Health")) is False

    def test_any_of_single(self) -> None:
        """any_of with single filter behaves as that filter."""
        flt = any_of(DEPRECATED)

        assert flt(make_member(deprecated=True)) is True
        assert flt(make_member()) is False

    def test_any_of_short_circuits(self) -> None:
        """any_of stops at the first passing filter."""
        seen: list[str] = []

        def _record(label: str, result: bool):
            def _filter(item: object) -> bool:
                seen.append(label)
                return result

            return _filter

        flt = any_of(_record("first", True), _record("second", True))

        assert flt(make_member()) is True
        assert seen == ["first"]

    def test_any_of_empty_passes_everything(self, caplog: pytest.LogCaptureFixture) -> None:
        """any_of with no filters passes everything."""
        caplog.set_level(logging.WARNING, logger="apifilter")
        flt = any_of()

        assert flt(make_member()) is True
        assert flt(make_member(member_type="Event", deprecated=True)) is True
        assert flt({}) is True

    def test_any_of_empty_warns_once_per_call(self, caplog: pytest.LogCaptureFixture) -> None:
        """Each empty any_of() call logs exactly one warning."""
        caplog.set_level(logging.WARNING, logger="apifilter")

        flt = any_of()
        flt(make_member())
        flt(make_member())
        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.WARNING
        assert "any_of" in caplog.records[0].getMessage()

        any_of()
        assert len(caplog.records) == 2

    def test_any_of_with_filters_does_not_warn(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.WARNING, logger="apifilter")

        any_of(DEPRECATED)

        assert caplog.records == []

    def test_any_of_rejects_non_callable(self) -> None:
        with pytest.raises(FilterDefinitionError, match="any_of"):
            any_of(None)  # type: ignore[arg-type]


class TestInvert:
    """Tests for invert (NOT) filter."""

    def test_invert_inverts(self) -> None:
        """invert flips the filter result."""
        flt = invert(DEPRECATED)

        assert flt(make_member(deprecated=True)) is False
        assert flt(make_member(deprecated=False)) is True

    @pytest.mark.parametrize("deprecated", [True, False])
    def test_invert_matches_negation(self, deprecated: bool) -> None:
        member = make_member(deprecated=deprecated)
        assert invert(DEPRECATED)(member) is (not DEPRECATED(member))

    def test_double_invert(self) -> None:
        flt = invert(invert(has_name("Health")))

        assert flt(make_member(name="Health")) is True
        assert flt(make_member(name="Died")) is False

    def test_invert_rejects_non_callable(self) -> None:
        with pytest.raises(FilterDefinitionError, match="invert"):
            invert("Deprecated")  # type: ignore[arg-type]


class TestComposition:
    """Tests for complex filter compositions."""

    def test_nested_composition(self) -> None:
        """Filters can be nested arbitrarily."""
        # Non-deprecated properties OR any event
        flt = any_of(
            all_of(is_member_type("Property"), invert(DEPRECATED)),
            is_member_type("Event"),
        )

        assert flt(make_member(member_type="Property")) is True
        assert flt(make_member(member_type="Property", deprecated=True)) is False
        assert flt(make_member(member_type="Event", deprecated=True)) is True
