import logging
from types import SimpleNamespace

import pytest

from effectgraph.exceptions import InvalidValueError
from effectgraph.nodes import NodeKind, PushNode, RectOverlapNode
from effectgraph.types import Rect


def rect(x, y, w, h):
    return {"x": x, "y": y, "width": w, "height": h}


def make_overlap(const, recorder, rect_a, rect_b):
    node = RectOverlapNode()
    node.inputs = [None, const(rect_a), const(rect_b)]
    node.nexts = [recorder.branch("overlap"), recorder.branch("no-overlap")]
    return node


def test_overlapping_rects_take_overlap_branch(const, recorder):
    make_overlap(const, recorder, rect(0, 0, 2, 2), rect(1, 1, 2, 2)).evaluate()
    assert recorder.calls == ["overlap"]


def test_touching_edges_do_not_overlap(const, recorder):
    make_overlap(const, recorder, rect(0, 0, 2, 2), rect(2, 0, 2, 2)).evaluate()
    assert recorder.calls == ["no-overlap"]


def test_touching_corner_does_not_overlap(const, recorder):
    make_overlap(const, recorder, rect(0, 0, 2, 2), rect(2, 2, 1, 1)).evaluate()
    assert recorder.calls == ["no-overlap"]


@pytest.mark.parametrize(
    "rect_a, rect_b, expected",
    [
        (rect(0, 0, 10, 10), rect(2, 2, 1, 1), "overlap"),
        (rect(2, 2, 1, 1), rect(0, 0, 10, 10), "overlap"),
        (rect(0, 0, 1, 1), rect(5, 0, 1, 1), "no-overlap"),
        (rect(0, 0, 1, 1), rect(0, 5, 1, 1), "no-overlap"),
        (rect(-3, -3, 4, 4), rect(0.5, 0.5, 1, 1), "overlap"),
    ],
)
def test_branch_choice(const, recorder, rect_a, rect_b, expected):
    make_overlap(const, recorder, rect_a, rect_b).evaluate()
    assert recorder.calls == [expected]


@pytest.mark.parametrize("missing", ["x", "y", "width", "height"])
@pytest.mark.parametrize("which", [1, 2])
def test_incomplete_rect_takes_no_branch(const, recorder, missing, which):
    rects = [rect(0, 0, 2, 2), rect(1, 1, 2, 2)]
    rects[which - 1][missing] = None
    make_overlap(const, recorder, *rects).evaluate()
    assert recorder.calls == []


def test_missing_field_takes_no_branch(const, recorder):
    make_overlap(const, recorder, {"x": 0, "y": 0, "width": 2}, rect(1, 1, 2, 2)).evaluate()
    assert recorder.calls == []


@pytest.mark.parametrize("rect_a, rect_b", [(None, rect(0, 0, 1, 1)), (rect(0, 0, 1, 1), None), (None, None)])
def test_unset_rect_takes_no_branch(const, recorder, rect_a, rect_b):
    make_overlap(const, recorder, rect_a, rect_b).evaluate()
    assert recorder.calls == []


def test_unwired_rect_input_takes_no_branch(const, recorder):
    node = RectOverlapNode()
    node.inputs[1] = const(rect(0, 0, 1, 1))
    node.nexts = [recorder.branch("overlap"), recorder.branch("no-overlap")]
    node.evaluate()
    assert recorder.calls == []


def test_unwired_branch_is_skipped(const, recorder):
    node = RectOverlapNode()
    node.inputs = [None, const(rect(0, 0, 2, 2)), const(rect(1, 1, 2, 2))]
    node.nexts = [None, recorder.branch("no-overlap")]
    node.evaluate()
    assert recorder.calls == []

    node.nexts = [recorder.branch("overlap")]
    node.inputs[2] = const(rect(5, 5, 1, 1))
    node.evaluate()
    assert recorder.calls == []


def test_never_fires_both_branches(const, recorder):
    cases = [
        (rect(0, 0, 2, 2), rect(1, 1, 2, 2)),
        (rect(0, 0, 2, 2), rect(2, 0, 2, 2)),
        (rect(0, 0, 2, 2), rect(9, 9, 2, 2)),
    ]
    for rect_a, rect_b in cases:
        recorder.calls.clear()
        make_overlap(const, recorder, rect_a, rect_b).evaluate()
        assert len(recorder.calls) == 1


def test_slot_zero_is_not_read(const, recorder):
    def trigger():
        raise AssertionError("execution pin must not be read")

    node = make_overlap(const, recorder, rect(0, 0, 2, 2), rect(1, 1, 2, 2))
    node.inputs[0] = trigger
    node.evaluate()
    assert recorder.calls == ["overlap"]


def test_accepts_rect_models_and_attribute_objects(const, recorder):
    a = Rect(x=0, y=0, width=2, height=2)
    b = SimpleNamespace(x=1, y=1, width=2, height=2)
    make_overlap(const, recorder, a, b).evaluate()
    assert recorder.calls == ["overlap"]


def test_inputs_are_not_mutated(const, recorder):
    a = rect(0, 0, 2, 2)
    b = rect(1, 1, 2, 2)
    make_overlap(const, recorder, a, b).evaluate()
    assert a == rect(0, 0, 2, 2)
    assert b == rect(1, 1, 2, 2)


def test_non_numeric_field_raises(const, recorder):
    node = make_overlap(const, recorder, rect("left", 0, 2, 2), rect(1, 1, 2, 2))
    with pytest.raises(InvalidValueError) as exc:
        node.evaluate()
    assert exc.value.code == "effectgraph.invalid_value"
    assert recorder.calls == []


def test_continuation_errors_propagate(const):
    def broken():
        raise RuntimeError("downstream failed")

    node = RectOverlapNode()
    node.inputs = [None, const(rect(0, 0, 2, 2)), const(rect(1, 1, 2, 2))]
    node.nexts = [broken, None]
    with pytest.raises(RuntimeError, match="downstream failed"):
        node.evaluate()


def test_evaluate_returns_none(const, recorder):
    assert make_overlap(const, recorder, rect(0, 0, 2, 2), rect(1, 1, 2, 2)).evaluate() is None


def test_abort_is_traced_at_debug(const, recorder, caplog):
    caplog.set_level(logging.DEBUG, logger="EffectGraph")
    make_overlap(const, recorder, None, rect(0, 0, 1, 1)).evaluate()
    assert any("RectOverlap aborted" in r.getMessage() for r in caplog.records)


def test_rect_overlap_is_a_push_node(host):
    node = RectOverlapNode(host=host)
    assert node.host is host
    assert node.kind is NodeKind.PUSH
    assert isinstance(node, PushNode)
    assert node.nexts == [None, None]
    assert len(node.inputs) == 3
