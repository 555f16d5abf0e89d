from solidauthz.credentials import HttpRequest
from solidauthz.permissions import AccessMode, PermissionSet
from solidauthz.union_modes import UnionModesExtractor


class FixedExtractor:
    def __init__(self, result):
        self.result = result

    def extract(self, request):
        return self.result


REQUEST = HttpRequest(method="GET", path="/doc")


def test_combines_permission_sets():
    union = UnionModesExtractor(
        FixedExtractor(PermissionSet([AccessMode.READ])),
        FixedExtractor(PermissionSet([AccessMode.WRITE])),
    )
    assert union.extract(REQUEST) == PermissionSet([AccessMode.READ, AccessMode.WRITE])


def test_only_read_write_append_control_are_kept():
    union = UnionModesExtractor(
        FixedExtractor(PermissionSet([AccessMode.CREATE, AccessMode.DELETE, AccessMode.CONTROL]))
    )
    assert union.extract(REQUEST) == PermissionSet([AccessMode.CONTROL])


def test_access_map_uses_modes_of_request_target():
    union = UnionModesExtractor(
        FixedExtractor({"/doc": {AccessMode.APPEND}, "/other": {AccessMode.WRITE}})
    )
    assert union.extract(REQUEST) == PermissionSet([AccessMode.APPEND])


def test_no_extractors_give_empty_set():
    assert UnionModesExtractor().extract(REQUEST) == PermissionSet()


def test_managing_extractors():
    first = FixedExtractor(PermissionSet([AccessMode.READ]))
    second = FixedExtractor(PermissionSet([AccessMode.WRITE]))
    union = UnionModesExtractor(first)
    union.add_extractor(second)
    assert union.extractors == (first, second)
    assert union.has_extractor(second)

    union.remove_extractor(first)
    assert not union.has_extractor(first)
    assert len(union) == 1
    assert union.extract(REQUEST) == PermissionSet([AccessMode.WRITE])

    union.remove_extractor(first)
    assert len(union) == 1

    union.clear_extractors()
    assert len(union) == 0
    assert union.extract(REQUEST) == PermissionSet()