"""
Tests for execution.renderer (Tree Renderer)

Test Coverage:
- Content nodes follow option order and carry the option text
- Cycle detection: self-loops and longer cycles end in CYCLE nodes
- Missing root and dangling options end in MISSING nodes
- Shared descendants (diamonds) render once per path
- Solution guides are resolved for the selected machine
"""
from coffee_helper.execution.renderer import render
from coffee_helper.execution.schemas.tree import NodeKind
from coffee_helper.repositories.step import InMemoryStepRepository
from coffee_helper.state.models import MachineSelection


def test_renders_options_in_order(question, solution):
    store = InMemoryStepRepository(
        [question("symptom-start", "sol-b", "sol-a"), solution("sol-a"), solution("sol-b")]
    )

    root = render(store, "symptom-start")

    assert root.kind == NodeKind.CONTENT
    assert root.option_text is None
    assert [c.step_id for c in root.children] == ["sol-b", "sol-a"]
    assert [c.option_text for c in root.children] == ["to sol-b", "to sol-a"]
    assert all(c.kind == NodeKind.CONTENT and c.children == [] for c in root.children)


def test_self_loop_is_a_cycle_node(question):
    store = InMemoryStepRepository([question("symptom-start", "symptom-start")])

    root = render(store, "symptom-start")

    assert root.kind == NodeKind.CONTENT
    [child] = root.children
    assert child.kind == NodeKind.CYCLE
    assert child.step_id == "symptom-start"
    assert child.is_terminal
    assert child.children == []


def test_longer_cycle_terminates(question, solution):
    store = InMemoryStepRepository(
        [question("a", "b"), question("b", "a", "sol-done"), solution("sol-done")]
    )

    root = render(store, "a")

    b = root.children[0]
    assert b.kind == NodeKind.CONTENT
    assert [(c.kind, c.step_id) for c in b.children] == [
        (NodeKind.CYCLE, "a"),
        (NodeKind.CONTENT, "sol-done"),
    ]


def test_missing_root(question):
    store = InMemoryStepRepository([question("symptom-start")])

    root = render(store, "nonexistent")

    assert root.kind == NodeKind.MISSING
    assert root.step_id == "nonexistent"
    assert root.step is None
    assert root.children == []


def test_dangling_option_renders_missing_leaf(question):
    store = InMemoryStepRepository([question("symptom-start", "q1"), question("q1", "sol-X")])

    root = render(store, "symptom-start")

    leaf = root.children[0].children[0]
    assert leaf.kind == NodeKind.MISSING
    assert leaf.step_id == "sol-X"
    assert leaf.option_text == "to sol-X"


def test_diamond_renders_shared_step_on_both_paths(question, solution):
    store = InMemoryStepRepository(
        [
            question("symptom-start", "q-left", "q-right"),
            question("q-left", "sol-shared"),
            question("q-right", "sol-shared"),
            solution("sol-shared"),
        ]
    )

    root = render(store, "symptom-start")

    shared = [n for n in root.iter_nodes() if n.step_id == "sol-shared"]
    assert len(shared) == 2
    assert all(n.kind == NodeKind.CONTENT for n in shared)
    assert not any(n.kind == NodeKind.CYCLE for n in root.iter_nodes())


def test_sample_tree_renders_without_gaps(sample_store, sample_catalog):
    root = render(sample_store, sample_store.entry_point_id, sample_catalog)

    nodes = list(root.iter_nodes())
    assert all(n.kind == NodeKind.CONTENT for n in nodes)
    assert {n.step_id for n in nodes} == {s.id for s in sample_store.list_all()}


def test_solution_guide_resolved_for_machine(question, solution, fallback_catalog):
    store = InMemoryStepRepository(
        [question("symptom-start", "sol-fix"), solution("sol-fix", guide_id="breville-express-repair")]
    )
    gaggia = MachineSelection(brand="Gaggia", model="Classic Pro")

    plain = render(store, "symptom-start", fallback_catalog)
    for_gaggia = render(store, "symptom-start", fallback_catalog, gaggia)

    assert plain.children[0].guide.id == "breville-express-repair"
    assert for_gaggia.children[0].guide.id == "gaggia-classic-repair"


def test_without_catalog_no_guides_attached(question, solution):
    store = InMemoryStepRepository(
        [question("symptom-start", "sol-fix"), solution("sol-fix", guide_id="guide-001")]
    )

    root = render(store, "symptom-start")

    assert root.children[0].guide is None
