import dataclasses

import numpy as np
import pytest

from flist import NIL, Cons, FList, Nil, cons, flist_of, nil
from flist import config as fl_config


@pytest.fixture(autouse=True)
def _default_runtime(monkeypatch: pytest.MonkeyPatch):
    for key in ["FLIST_TRAVERSAL", "FLIST_REPR_LIMIT", "FLIST_RECURSION_LIMIT"]:
        monkeypatch.delenv(key, raising=False)
    fl_config.reset_runtime_config_cache()
    yield
    fl_config.reset_runtime_config_cache()


def test_empty_list_has_no_elements():
    assert NIL.size == 0
    assert NIL.is_empty
    assert len(NIL) == 0
    assert not NIL
    assert list(NIL) == []


def test_all_empty_lists_are_equal():
    assert Nil() == NIL
    assert nil() is NIL
    assert hash(Nil()) == hash(NIL)
    assert len({NIL, Nil(), flist_of()}) == 1


def test_cons_size_counts_every_node():
    lst = Cons(1, Cons(2, Cons(3, NIL)))
    assert lst.size == 3
    assert not lst.is_empty
    assert lst
    assert lst.head == 1
    assert lst.tail == flist_of(2, 3)


def test_map_doubles_values():
    assert flist_of(1, 2, 3).map(lambda x: x * 2) == flist_of(2, 4, 6)


def test_filter_keeps_even_values():
    assert flist_of(1, 2, 3).filter(lambda x: x % 2 == 0) == flist_of(2)


def test_fold_sums_values():
    assert flist_of(1, 2, 3).fold(0, lambda acc, x: acc + x) == 6


def test_fold_combines_last_element_first():
    result = flist_of("a", "b", "c").fold("", lambda acc, x: acc + x)
    assert result == "cba"


def test_fold_of_empty_list_returns_base():
    sentinel = object()
    assert NIL.fold(sentinel, lambda acc, x: x) is sentinel


def test_reverse():
    assert flist_of(1, 2, 3).reverse() == flist_of(3, 2, 1)
    assert flist_of().reverse() == NIL
    assert flist_of(1).reverse() == flist_of(1)


def test_operations_leave_source_untouched():
    source = flist_of(1, 2, 3)
    source.map(lambda x: x + 1)
    source.filter(lambda x: x > 1)
    source.reverse()
    assert list(source) == [1, 2, 3]


def test_nodes_are_frozen():
    lst = flist_of(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        lst.head = 5  # type: ignore[misc]


def test_cons_shares_tail():
    base = flist_of(2, 3)
    first = cons(1, base)
    second = base.prepend(9)
    assert first.tail is base
    assert second.tail is base
    assert first == flist_of(1, 2, 3)
    assert second == flist_of(9, 2, 3)


def test_cons_rejects_non_list_tail():
    with pytest.raises(TypeError):
        cons(1, [2, 3])  # type: ignore[arg-type]


def test_equality_is_structural():
    assert flist_of(1, 2, 3) == flist_of(1, 2, 3)
    assert flist_of(1, 2, 3) != flist_of(1, 2)
    assert flist_of(1, 2) != flist_of(1, 2, 3)
    assert flist_of(1, 2, 3) != flist_of(1, 2, 4)
    assert flist_of(1, 2) != [1, 2]
    assert hash(flist_of(1, 2)) == hash(flist_of(1, 2))


def test_repr_lists_elements():
    assert repr(flist_of(1, "a")) == "FList[1, 'a']"
    assert repr(NIL) == "FList[]"


def test_repr_truncates_long_lists(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("FLIST_REPR_LIMIT", "2")
    fl_config.reset_runtime_config_cache()

    assert repr(flist_of(1, 2, 3)) == "FList[1, 2, ...]"
    assert repr(flist_of(1, 2)) == "FList[1, 2]"


def test_repr_limit_zero_disables_truncation(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("FLIST_REPR_LIMIT", "0")
    fl_config.reset_runtime_config_cache()

    assert repr(flist_of(*range(12))) == f"FList[{', '.join(str(i) for i in range(12))}]"


def test_to_numpy_materialises_in_order():
    array = flist_of(1, 2, 3).to_numpy(dtype=np.int64)
    assert array.dtype == np.int64
    assert np.array_equal(array, np.array([1, 2, 3]))
    assert NIL.to_numpy().shape == (0,)


def test_variants_are_lists():
    assert isinstance(NIL, FList)
    assert isinstance(flist_of(1), FList)


def test_base_class_cannot_be_instantiated():
    with pytest.raises(TypeError):
        FList()
    with pytest.raises(TypeError):
        FList[int]()
