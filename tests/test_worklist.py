import pytest

from cfg_strgen.worklist import (
    BOUNDARY, EmptyWorklistError, Worklist, SetWorklist, CountingWorklist,
    ConservativeMapWorklist, AdditiveMapWorklist,
)


def drain(worklist):
    taken = []
    while len(worklist):
        taken.append(worklist.take())
    return taken


def test_plain_worklist_keeps_duplicates_in_order():
    wl = Worklist()
    assert wl.add("a")
    assert wl.add("b")
    assert wl.add("a")
    assert len(wl) == 3
    assert drain(wl) == [("a", 1), ("b", 1), ("a", 1)]


def test_set_worklist_drops_pending_duplicates():
    wl = SetWorklist()
    assert wl.add("a") is True
    assert wl.add("b") is True
    assert wl.add("a") is False
    assert len(wl) == 2
    assert drain(wl) == [("a", 1), ("b", 1)]


def test_set_worklist_accepts_item_again_after_take():
    wl = SetWorklist()
    wl.add("a")
    assert wl.take() == ("a", 1)
    assert wl.add("a") is True
    assert len(wl) == 1


def test_counting_worklist_returns_accumulated_count_on_take():
    wl = CountingWorklist()
    wl.add("a")
    wl.add("b", 4)
    wl.add("a", 2)
    assert wl.take() == ("a", 3)
    assert wl.take() == ("b", 4)
    assert len(wl) == 0


def test_conservative_map_keeps_first_paths():
    wl = ConservativeMapWorklist()
    wl.add("0A", [((0, "0A"),)])
    assert wl.add("0A", [((0, "other"),)]) is False
    assert wl.take() == ("0A", [((0, "0A"),)])


def test_additive_map_concatenates_paths_without_aliasing():
    wl = AdditiveMapWorklist()
    first = [("0A",)]
    second = [("1B",)]
    wl.add("x", first)
    wl.add("x", second)
    assert wl.take() == ("x", [("0A",), ("1B",)])
    assert first == [("0A",)]
    assert second == [("1B",)]


@pytest.mark.parametrize("cls", [Worklist, SetWorklist, CountingWorklist, ConservativeMapWorklist, AdditiveMapWorklist])
def test_take_from_empty_worklist_raises(cls):
    with pytest.raises(EmptyWorklistError):
        cls().take()


def test_items_after_boundary_do_not_merge_into_earlier_round():
    wl = CountingWorklist()
    wl.add("a", 2)
    wl.add(BOUNDARY)
    wl.add("b")
    assert wl.add("a", 3) is True
    assert wl.add("a") is False
    assert drain(wl) == [("a", 2), (BOUNDARY, 1), ("b", 1), ("a", 4)]


def test_set_worklist_keeps_duplicate_across_boundary():
    wl = SetWorklist()
    wl.add("a")
    wl.add(BOUNDARY)
    wl.add("a")
    assert [item for item, _ in drain(wl)] == ["a", BOUNDARY, "a"]
