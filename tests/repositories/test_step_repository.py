"""
Tests for repositories.step (Step Graph Store)

Test Coverage:
- create/upsert/update: uniqueness and immutable id/kind
- delete(): dependency-safe deletion and the protected entry point
- list_all(), search(), snapshot(): ordering and isolation
- Reads and writes copy steps in and out of the store
"""
import pytest

from coffee_helper.data.sample_data import TROUBLESHOOT_STEPS
from coffee_helper.domain.exceptions import (
    DependencyConflict,
    ImmutableFieldViolation,
    ProtectedEntryPoint,
    StepAlreadyExists,
    StepNotFoundError,
)
from coffee_helper.domain.models import Option, Question, Solution
from coffee_helper.repositories.step import InMemoryStepRepository


@pytest.fixture
def store(question, solution):
    return InMemoryStepRepository(
        [
            question("symptom-start", "q-leak", "sol-power"),
            question("q-leak", "sol-gasket"),
            solution("sol-gasket"),
            solution("sol-power"),
        ]
    )


class TestUpsert:
    def test_new_id_grows_store_by_one(self, store, solution):
        before = len(store)

        store.upsert(solution("sol-new"))

        assert len(store) == before + 1
        assert store.get("sol-new").title == "Solution sol-new"

    def test_existing_id_replaces_without_growing(self, store):
        before = len(store)
        replacement = Solution(id="sol-gasket", title="Replace the gasket", description="Fit a new one.")

        store.upsert(replacement)

        assert len(store) == before
        assert store.get("sol-gasket").title == "Replace the gasket"

    def test_changing_kind_is_rejected(self, store, question):
        with pytest.raises(ImmutableFieldViolation) as exc_info:
            store.upsert(question("sol-gasket", "symptom-start"))

        assert exc_info.value.field == "kind"
        assert exc_info.value.old_value == "solution"
        assert isinstance(store.get("sol-gasket"), Solution)

    def test_replacement_keeps_listing_position(self, store):
        store.upsert(Solution(id="sol-gasket", title="Gasket v2", description="Updated."))

        assert [s.id for s in store.list_all()] == ["symptom-start", "q-leak", "sol-gasket", "sol-power"]


class TestCreateAndUpdate:
    def test_create_rejects_duplicate_id(self, store, solution):
        with pytest.raises(StepAlreadyExists):
            store.create(solution("sol-power"))

    def test_create_appends(self, store, solution):
        store.create(solution("sol-descale"))

        assert store.list_all()[-1].id == "sol-descale"

    def test_update_rejects_id_change(self, store, solution):
        with pytest.raises(ImmutableFieldViolation) as exc_info:
            store.update("sol-power", solution("sol-power-renamed"))

        assert exc_info.value.field == "id"
        assert store.get("sol-power-renamed") is None

    def test_update_rejects_kind_change(self, store, question):
        with pytest.raises(ImmutableFieldViolation) as exc_info:
            store.update("sol-power", question("sol-power", "q-leak"))

        assert exc_info.value.field == "kind"

    def test_update_unknown_step(self, store, solution):
        with pytest.raises(StepNotFoundError):
            store.update("nope", solution("nope"))

    def test_update_may_leave_dangling_option(self, store):
        """Incremental editing: pointing at a step that doesn't exist yet is allowed."""
        store.update(
            "q-leak",
            Question(id="q-leak", text="Where?", options=[Option(text="Wand", next_step_id="sol-wand")]),
        )

        assert store.get("q-leak").options[0].next_step_id == "sol-wand"


class TestDelete:
    def test_referenced_step_cannot_be_deleted(self, store):
        with pytest.raises(DependencyConflict) as exc_info:
            store.delete("sol-gasket")

        assert exc_info.value.referencing_ids == ["q-leak"]
        assert store.get("sol-gasket") is not None

    def test_delete_succeeds_once_reference_removed(self, store):
        store.update("q-leak", Question(id="q-leak", text="Where?", options=[]))

        store.delete("sol-gasket")

        assert store.get("sol-gasket") is None

    def test_conflict_lists_every_referencing_question(self, store, question):
        store.upsert(question("q-other", "sol-power", "sol-power"))

        with pytest.raises(DependencyConflict) as exc_info:
            store.delete("sol-power")

        assert exc_info.value.referencing_ids == ["symptom-start", "q-other"]

    def test_entry_point_protected_while_others_exist(self, question, solution):
        store = InMemoryStepRepository([question("symptom-start", "sol-a"), solution("orphan")])
        store.update("symptom-start", question("symptom-start"))

        with pytest.raises(ProtectedEntryPoint):
            store.delete("symptom-start")

    def test_sole_entry_point_can_be_deleted(self, question):
        store = InMemoryStepRepository([question("symptom-start")])

        store.delete("symptom-start")

        assert len(store) == 0

    @pytest.mark.parametrize(
        "steps, step_id",
        [
            pytest.param([("symptom-start", "symptom-start")], "symptom-start", id="sole-entry-point"),
            pytest.param([("symptom-start",), ("q-retry", "q-retry")], "q-retry", id="retry-loop"),
        ],
    )
    def test_self_reference_blocks_delete(self, question, steps, step_id):
        store = InMemoryStepRepository([question(*step) for step in steps])

        with pytest.raises(DependencyConflict) as exc_info:
            store.delete(step_id)

        assert exc_info.value.referencing_ids == [step_id]
        assert store.get(step_id) is not None

    def test_delete_unknown_step(self, store):
        with pytest.raises(StepNotFoundError):
            store.delete("missing")


def test_custom_entry_point(question):
    store = InMemoryStepRepository([question("start-here"), question("other")], entry_point_id="start-here")

    assert store.entry_point_id == "start-here"
    with pytest.raises(ProtectedEntryPoint):
        store.delete("start-here")


def test_seed_data_is_copied():
    """Edits to a store never leak into the shipped sample tree."""
    store = InMemoryStepRepository(TROUBLESHOOT_STEPS)
    store.update("symptom-start", Question(id="symptom-start", text="What is wrong?", options=[]))

    assert len(TROUBLESHOOT_STEPS[0].options) == 4
    assert store.get("q-leak-location") is not TROUBLESHOOT_STEPS[1]


def test_reads_return_copies(store):
    store.get("q-leak").options.clear()
    store.list_all()[0].options.clear()
    store.snapshot()["sol-gasket"].title = "Changed outside the store"

    assert store.get("q-leak").options[0].next_step_id == "sol-gasket"
    assert len(store.get("symptom-start").options) == 2
    assert store.get("sol-gasket").title == "Solution sol-gasket"


def test_writes_store_a_copy(store, solution):
    step = solution("sol-descale")
    store.create(step)

    step.title = "Edited after create"

    assert store.get("sol-descale").title == "Solution sol-descale"


def test_snapshot_is_isolated_from_later_edits(store, solution):
    snapshot = store.snapshot()
    store.upsert(solution("sol-late"))

    assert "sol-late" not in snapshot
    assert list(snapshot) == ["symptom-start", "q-leak", "sol-gasket", "sol-power"]


def test_search_matches_id_text_and_title(sample_store):
    assert [s.id for s in sample_store.search("taste")] == [
        "q-bad-taste-type",
        "sol-bad-taste-bitter",
        "sol-bad-taste-sour",
        "sol-bad-taste-stale",
    ]
    assert [s.id for s in sample_store.search("LEAKING GROUP")] == ["sol-leak-grouphead"]
    assert len(sample_store.search("  ")) == len(sample_store)


def test_references_to(store):
    assert store.references_to("q-leak") == ["symptom-start"]
    assert store.references_to("symptom-start") == []
