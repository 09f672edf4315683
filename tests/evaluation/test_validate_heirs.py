"""
Heir List Validator Test: Every malformed shape produces a targeted diagnostic.

Each test builds a minimal heir list and asserts on (heir_id, field) pairs,
the same coordinates an editor uses to highlight the offending input.
"""

from datetime import date

from succession.constants import (
    CHECK_CIRCULAR_REFERENCE,
    CHECK_CURRENT_SPOUSE,
    CHECK_DUPLICATE_ID,
    CHECK_REPRESENTATION_SCOPE,
    CHECK_RE_TRANSFER_DEATH,
    CHECK_SUCCESSOR_LINK,
)
from succession.core.core_types import Decedent, Heir, Relation, Status
from succession.evaluation.validate_heirs import (
    check_hv6_circular_reference,
    errors_by_heir,
    validate,
)
from succession.core.lineage import HeirIndex

DECEDENT = Decedent("d", "Wang Da-ming", date(2024, 1, 1))


def has_error(errors, heir_id, field):
    return any(e.heir_id == heir_id and e.field == field for e in errors)


class TestValidInput:

    def test_valid_family_has_no_errors(self):
        heirs = [
            Heir("1", "Spouse", Relation.SPOUSE),
            Heir("2", "Son", Relation.CHILD),
            Heir("3", "Daughter", Relation.CHILD, Status.DECEASED, death_date=date(2023, 1, 1)),
            Heir("4", "Grandson", Relation.CHILD, Status.REPRESENTATION, represented_id="3"),
        ]
        assert validate(heirs, DECEDENT) == []

    def test_empty_list(self):
        assert validate([], DECEDENT) == []

    def test_validate_never_raises_on_garbage(self):
        heirs = [
            Heir("x", "", Relation.SPOUSE, Status.REPRESENTATION, represented_id="x"),
            Heir("x", " ", Relation.CHILD, Status.RE_TRANSFER, represented_id="missing"),
        ]
        errors = validate(heirs)
        assert errors


class TestNamesAndIds:

    def test_blank_name(self):
        errors = validate([Heir("1", "   ", Relation.CHILD)], DECEDENT)
        assert has_error(errors, "1", "name")

    def test_duplicate_id(self):
        errors = validate([
            Heir("1", "A", Relation.CHILD),
            Heir("1", "B", Relation.CHILD),
        ], DECEDENT)
        duplicates = [e for e in errors if e.check_id == CHECK_DUPLICATE_ID]
        assert len(duplicates) == 1
        assert duplicates[0].field == "id"


class TestSpouses:

    def test_two_current_spouses(self):
        errors = validate([
            Heir("1", "Spouse A", Relation.SPOUSE),
            Heir("2", "Spouse B", Relation.SPOUSE),
        ], DECEDENT)
        assert has_error(errors, "2", "relation")
        assert not has_error(errors, "1", "relation")
        assert errors[0].check_id == CHECK_CURRENT_SPOUSE

    def test_divorced_spouses_are_allowed(self):
        errors = validate([
            Heir("1", "Former A", Relation.SPOUSE, divorce_date=date(2000, 1, 1)),
            Heir("2", "Former B", Relation.SPOUSE, divorce_date=date(2010, 1, 1)),
            Heir("3", "Current", Relation.SPOUSE),
        ], DECEDENT)
        assert errors == []

    def test_new_spouse_after_deceased_spouse(self):
        errors = validate([
            Heir("1", "First", Relation.SPOUSE, Status.DECEASED, death_date=date(2015, 1, 1)),
            Heir("2", "Second", Relation.SPOUSE),
        ], DECEDENT)
        assert not has_error(errors, "2", "relation")

    def test_divorced_spouse_has_no_date_errors(self):
        errors = validate([
            Heir("1", "Former", Relation.SPOUSE, divorce_date=date(2020, 1, 1)),
        ], DECEDENT)
        assert errors == []

    def test_current_spouse_counted_per_branch(self):
        errors = validate([
            Heir("1", "X", Relation.CHILD, Status.DECEASED, death_date=date(2023, 1, 1)),
            Heir("2", "X spouse A", Relation.CHILD_SPOUSE, Status.RE_TRANSFER, represented_id="1"),
            Heir("3", "X spouse B", Relation.CHILD_SPOUSE, Status.RE_TRANSFER, represented_id="1"),
        ], DECEDENT)
        assert has_error(errors, "3", "relation")
        assert not has_error(errors, "2", "relation")

    def test_root_and_branch_spouses_do_not_collide(self):
        errors = validate([
            Heir("1", "Spouse", Relation.SPOUSE),
            Heir("2", "Son", Relation.CHILD, Status.RE_TRANSFER, death_date=date(2024, 3, 1)),
            Heir("3", "Son's wife", Relation.CHILD_SPOUSE, Status.RE_TRANSFER, represented_id="2"),
        ], DECEDENT)
        assert errors == []

    def test_spouse_cannot_represent(self):
        errors = validate([
            Heir("1", "Son", Relation.CHILD, Status.DECEASED, death_date=date(2023, 1, 1)),
            Heir("2", "Spouse", Relation.SPOUSE, Status.REPRESENTATION, represented_id="1"),
        ], DECEDENT)
        assert has_error(errors, "2", "represented_id")
        assert any(e.heir_id == "2" and "spouse" in e.message for e in errors)

    def test_normal_spouse_with_back_reference(self):
        errors = validate([
            Heir("s", "Spouse", Relation.SPOUSE, represented_id="x"),
            Heir("a", "Son", Relation.CHILD),
        ], DECEDENT)
        assert [(e.heir_id, e.field, e.check_id) for e in errors] == [
            ("s", "represented_id", CHECK_SUCCESSOR_LINK),
        ]

    def test_child_spouse_may_carry_back_reference(self):
        errors = validate([
            Heir("1", "Son", Relation.CHILD, Status.RE_TRANSFER, death_date=date(2024, 3, 1)),
            Heir("2", "Son's wife", Relation.CHILD_SPOUSE, Status.RE_TRANSFER, represented_id="1"),
        ], DECEDENT)
        assert errors == []


class TestRepresentation:

    def test_missing_back_reference(self):
        errors = validate([Heir("1", "Grandson", Relation.CHILD, Status.REPRESENTATION)], DECEDENT)
        assert has_error(errors, "1", "represented_id")

    def test_unknown_back_reference(self):
        errors = validate([
            Heir("1", "Grandson", Relation.CHILD, Status.REPRESENTATION, represented_id="999"),
        ], DECEDENT)
        assert has_error(errors, "1", "represented_id")

    def test_represented_heir_alive(self):
        errors = validate([
            Heir("1", "Son", Relation.CHILD),
            Heir("2", "Grandson", Relation.CHILD, Status.REPRESENTATION, represented_id="1"),
        ], DECEDENT)
        assert has_error(errors, "2", "represented_id")

    def test_represented_heir_renounced(self):
        errors = validate([
            Heir("1", "Son", Relation.CHILD, Status.RENOUNCED),
            Heir("2", "Grandson", Relation.CHILD, Status.REPRESENTATION, represented_id="1"),
        ], DECEDENT)
        assert has_error(errors, "2", "represented_id")

    def test_represented_heir_deceased_without_issue(self):
        errors = validate([
            Heir("1", "Son", Relation.CHILD, Status.DECEASED_WITHOUT_ISSUE, death_date=date(2023, 1, 1)),
            Heir("2", "Grandson", Relation.CHILD, Status.REPRESENTATION, represented_id="1"),
        ], DECEDENT)
        assert has_error(errors, "2", "represented_id")
        assert any(e.heir_id == "2" and "deceased_without_issue" in e.message for e in errors)

    def test_only_children_are_represented(self):
        errors = validate([
            Heir("1", "Brother", Relation.SIBLING, Status.DECEASED, death_date=date(2023, 1, 1)),
            Heir("2", "Nephew", Relation.CHILD, Status.REPRESENTATION, represented_id="1"),
        ], DECEDENT)
        assert has_error(errors, "2", "status")

    def test_deceased_spouse_is_not_represented(self):
        errors = validate([
            Heir("1", "Spouse", Relation.SPOUSE, Status.DECEASED, death_date=date(2023, 1, 1)),
            Heir("2", "Grandson", Relation.CHILD, Status.REPRESENTATION, represented_id="1"),
        ], DECEDENT)
        assert has_error(errors, "2", "status")

    def test_represented_heir_died_after_decedent(self):
        errors = validate([
            Heir("1", "Son", Relation.CHILD, Status.DECEASED, death_date=date(2024, 6, 1)),
            Heir("2", "Grandson", Relation.CHILD, Status.REPRESENTATION, represented_id="1"),
        ], DECEDENT)
        scope = [e for e in errors if e.check_id == CHECK_REPRESENTATION_SCOPE]
        assert [(e.heir_id, e.field) for e in scope] == [("2", "status")]
        assert "re_transfer" in scope[0].message
        assert not has_error(errors, "1", "death_date")

    def test_same_day_death_is_allowed(self):
        errors = validate([
            Heir("1", "Son", Relation.CHILD, Status.DECEASED, death_date=date(2024, 1, 1)),
            Heir("2", "Grandson", Relation.CHILD, Status.REPRESENTATION, represented_id="1"),
        ], DECEDENT)
        assert errors == []

    def test_scope_check_skipped_without_decedent_date(self):
        errors = validate([
            Heir("1", "Son", Relation.CHILD, Status.DECEASED, death_date=date(2024, 6, 1)),
            Heir("2", "Grandson", Relation.CHILD, Status.REPRESENTATION, represented_id="1"),
        ], Decedent("d", "Unknown"))
        assert errors == []


class TestDeathDates:

    def test_deceased_without_date(self):
        errors = validate([Heir("1", "Son", Relation.CHILD, Status.DECEASED)], DECEDENT)
        assert has_error(errors, "1", "death_date")

    def test_deceased_without_issue_without_date(self):
        errors = validate([Heir("1", "Son", Relation.CHILD, Status.DECEASED_WITHOUT_ISSUE)], DECEDENT)
        assert has_error(errors, "1", "death_date")

    def test_deceased_after_decedent_is_not_a_date_error(self):
        errors = validate([
            Heir("1", "Son", Relation.CHILD, Status.DECEASED, death_date=date(2024, 6, 1)),
            Heir("2", "Grandson", Relation.CHILD, Status.RE_TRANSFER, represented_id="1"),
        ], DECEDENT)
        assert not has_error(errors, "1", "death_date")


class TestReTransfer:

    def test_origin_without_death_date(self):
        errors = validate([Heir("1", "Son", Relation.CHILD, Status.RE_TRANSFER)], DECEDENT)
        assert has_error(errors, "1", "death_date")

    def test_origin_died_before_decedent(self):
        errors = validate([
            Heir("1", "Son", Relation.CHILD, Status.RE_TRANSFER, death_date=date(2023, 6, 1)),
        ], DECEDENT)
        assert has_error(errors, "1", "death_date")
        assert any("later than" in e.message for e in errors)

    def test_origin_same_day_death(self):
        errors = validate([
            Heir("1", "Son", Relation.CHILD, Status.RE_TRANSFER, death_date=date(2024, 1, 1)),
        ], DECEDENT)
        assert [e.check_id for e in errors] == [CHECK_RE_TRANSFER_DEATH]

    def test_successor_needs_no_death_date(self):
        errors = validate([
            Heir("1", "Son", Relation.CHILD, Status.RE_TRANSFER, death_date=date(2024, 3, 1)),
            Heir("2", "Grandson", Relation.CHILD, Status.RE_TRANSFER, represented_id="1"),
        ], DECEDENT)
        assert errors == []

    def test_successor_of_living_heir(self):
        errors = validate([
            Heir("1", "Son", Relation.CHILD),
            Heir("2", "Grandson", Relation.CHILD, Status.RE_TRANSFER, represented_id="1"),
        ], DECEDENT)
        assert has_error(errors, "2", "represented_id")
        assert any(e.heir_id == "2" and "re_transfer" in e.message for e in errors)

    def test_successor_of_unknown_heir(self):
        errors = validate([
            Heir("2", "Grandson", Relation.CHILD, Status.RE_TRANSFER, represented_id="404"),
        ], DECEDENT)
        assert has_error(errors, "2", "represented_id")


class TestCycles:

    def test_circular_chain(self):
        heirs = [
            Heir("1", "A", Relation.CHILD, Status.REPRESENTATION, represented_id="2"),
            Heir("2", "B", Relation.CHILD, Status.REPRESENTATION, represented_id="1"),
        ]
        errors = validate(heirs, DECEDENT)
        cycles = [e for e in errors if e.check_id == CHECK_CIRCULAR_REFERENCE]
        assert {e.heir_id for e in cycles} == {"1", "2"}

    def test_self_reference(self):
        heirs = [Heir("1", "A", Relation.CHILD, Status.REPRESENTATION, represented_id="1")]
        errors = check_hv6_circular_reference(heirs, HeirIndex(heirs))
        assert [(e.heir_id, e.field) for e in errors] == [("1", "represented_id")]

    def test_chain_into_cycle_flags_entrant(self):
        heirs = [
            Heir("1", "A", Relation.CHILD, Status.REPRESENTATION, represented_id="2"),
            Heir("2", "B", Relation.CHILD, Status.REPRESENTATION, represented_id="3"),
            Heir("3", "C", Relation.CHILD, Status.REPRESENTATION, represented_id="2"),
        ]
        errors = check_hv6_circular_reference(heirs, HeirIndex(heirs))
        assert {e.heir_id for e in errors} == {"1", "2", "3"}


def test_errors_by_heir_groups_in_order():
    errors = validate([
        Heir("1", "", Relation.CHILD, Status.DECEASED),
        Heir("2", "Son", Relation.CHILD),
    ], DECEDENT)
    grouped = errors_by_heir(errors)
    assert list(grouped) == ["1"]
    assert [e.field for e in grouped["1"]] == ["name", "death_date"]
