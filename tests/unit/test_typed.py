import pytest

from prefutils.typed import LIST_FACTORIES, bool_list, bool_pref, float_list, string_list


def test_float_list(store):
    lst = float_list(store, "F")
    lst.extend([0.5, 1.5])
    lst.insert(1, 1.0)
    assert list(lst) == [0.5, 1.0, 1.5]


def test_string_list_remove(store):
    lst = string_list(store, "S")
    lst.extend(["a", "b", "a"])
    assert lst.remove("a") is True
    assert list(lst) == ["b", "a"]


def test_bool_list_encodes_as_int(store):
    lst = bool_list(store, "B")
    lst.extend([True, False, True])
    assert list(lst) == [True, False, True]
    assert store.get_int("B/1", -1) == 0
    assert lst.index_of(False) == 1


def test_typed_list_rejects_wrong_type(store):
    lst = string_list(store, "S")
    with pytest.raises(TypeError):
        lst.append(3)
    assert len(lst) == 0


@pytest.mark.parametrize("value", ["no", 1, 0, None])
def test_bool_list_rejects_non_bool(store, value):
    lst = bool_list(store, "B")
    with pytest.raises(TypeError):
        lst.append(value)
    assert len(lst) == 0
    assert store.has_key("B/0") is False


def test_bool_pref_rejects_non_bool(store):
    p = bool_pref(store, "Muted")
    with pytest.raises(TypeError):
        p.value = "no"
    assert store.has_key("Muted") is False


def test_list_factories_cover_value_types():
    assert set(LIST_FACTORIES) == {"int", "float", "string", "bool"}
