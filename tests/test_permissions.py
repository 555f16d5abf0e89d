import pytest

from solidauthz.permissions import AccessMode, PermissionSet

READ = AccessMode.READ
WRITE = AccessMode.WRITE
APPEND = AccessMode.APPEND


def test_access_mode_round_trips_through_value():
    for mode in AccessMode:
        assert AccessMode(mode.value) is mode
    assert AccessMode("control") is AccessMode.CONTROL


def test_unknown_mode_is_rejected():
    with pytest.raises(ValueError):
        PermissionSet(["fly"])


def test_add_and_has():
    perms = PermissionSet()
    assert not perms.has(READ)
    perms.add(READ)
    assert perms.has(READ)
    assert not perms.has(WRITE)


def test_construction_from_strings_and_mapping():
    assert PermissionSet(["read"]).has(READ)
    perms = PermissionSet({READ: True, WRITE: False})
    assert perms.has(READ)
    assert not perms.has(WRITE)
    assert WRITE in perms


def test_remove_forgets_decision():
    perms = PermissionSet({READ: False, WRITE: True})
    perms.remove(READ)
    perms.remove(APPEND)
    assert READ not in perms
    assert perms == PermissionSet([WRITE])


def test_clear_empties_set():
    perms = PermissionSet([READ, WRITE])
    perms.clear()
    assert len(perms) == 0
    assert perms.granted() == []


def test_granted_lists_only_allowed_modes_in_order():
    perms = PermissionSet({WRITE: True, READ: False, APPEND: True})
    assert perms.granted() == [WRITE, APPEND]


def test_intersect():
    a = PermissionSet([READ, WRITE])
    b = PermissionSet([WRITE, APPEND])
    result = a.intersect(b)
    assert result == PermissionSet([WRITE])
    result.add(APPEND)
    assert not a.has(APPEND)


def test_union():
    a = PermissionSet([READ])
    b = PermissionSet([WRITE, APPEND])
    result = a.union(b)
    assert result == PermissionSet([READ, WRITE, APPEND])
    assert a == PermissionSet([READ])


def test_difference():
    a = PermissionSet([READ, WRITE])
    b = PermissionSet([WRITE])
    assert a.difference(b) == PermissionSet([READ])
    assert b.difference(a) == PermissionSet()


def test_set_algebra_invariants():
    a = PermissionSet([READ, WRITE, AccessMode.DELETE])
    b = PermissionSet([WRITE, APPEND])
    union = a.union(b)
    assert set(a.intersect(b).granted()) <= set(union.granted())
    assert set(a.difference(b).granted()) | set(a.intersect(b).granted()) == set(
        a.granted()
    )