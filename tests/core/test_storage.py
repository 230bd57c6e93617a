import pytest

from dimensia.core.errors import InvariantError, StorageError
from dimensia.core.storage import ItemStorage, UnitClassId, UnitId


def test_add_returns_fresh_identities():
    store = ItemStorage(UnitClassId)
    a = store.add("Length")
    b = store.add("Time")
    assert a != b
    assert isinstance(a, UnitClassId)
    assert store.borrow(a) == "Length"
    assert store.borrow(b) == "Time"
    assert len(store) == 2


def test_identities_are_stable_and_hashable():
    store = ItemStorage(UnitId)
    a = store.add("Meter")
    store.add("Foot")
    assert store.borrow(a) == "Meter"
    assert {a: 1}[a] == 1


def test_borrow_from_other_storage_of_same_type_fails():
    one = ItemStorage(UnitId)
    two = ItemStorage(UnitId)
    ident = one.add("Meter")
    two.add("Foot")
    with pytest.raises(StorageError):
        two.borrow(ident)


def test_cross_type_identity_rejected():
    classes = ItemStorage(UnitClassId)
    units = ItemStorage(UnitId)
    class_id = classes.add("Length")
    units.add("Meter")
    with pytest.raises(StorageError):
        units.borrow(class_id)


def test_never_issued_identity_fails():
    store = ItemStorage(UnitId)
    ident = store.add("Meter")
    with pytest.raises(StorageError):
        store.borrow(UnitId(ident.index + 1, ident.owner))


def test_storage_error_is_an_invariant_error_and_lookup_error():
    assert issubclass(StorageError, InvariantError)
    assert issubclass(StorageError, LookupError)
    assert issubclass(InvariantError, AssertionError)


def test_different_identity_types_never_equal():
    assert UnitId(0, 1) != UnitClassId(0, 1)
    assert UnitId(0, 1) == UnitId(0, 1)


def test_items_iterates_in_registration_order():
    store = ItemStorage(UnitClassId)
    ids = [store.add(name) for name in ("L", "M", "T")]
    assert [(i, item) for i, item in store.items()] == list(zip(ids, ["L", "M", "T"]))
    assert ids[0] in store
    assert UnitId(0, ids[0].owner) not in store
