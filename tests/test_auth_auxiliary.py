from solidauthz.auth_auxiliary import AuthAuxiliaryReader
from solidauthz.permissions import AccessMode, PermissionSet


class SuffixReader:
    """Answers by path suffix; unknown suffixes fail."""

    def __init__(self, answers):
        self.answers = answers
        self.requested = []

    def read(self, resource):
        self.requested.append(resource)
        for suffix, perms in self.answers.items():
            if resource.endswith(suffix):
                return PermissionSet(perms)
        raise LookupError(resource)


def test_reads_auth_and_webid_auxiliaries():
    inner = SuffixReader(
        {".auth": [AccessMode.READ], ".webid": [AccessMode.WRITE, AccessMode.CONTROL]}
    )
    result = AuthAuxiliaryReader(inner).read("/path/to/resource")
    assert result == PermissionSet([AccessMode.READ, AccessMode.WRITE, AccessMode.CONTROL])
    assert inner.requested == ["/path/to/.resource.auth", "/path/to/.resource.webid"]


def test_failing_auxiliary_is_skipped():
    inner = SuffixReader({".webid": [AccessMode.APPEND]})
    result = AuthAuxiliaryReader(inner).read("/path/to/resource")
    assert result == PermissionSet([AccessMode.APPEND])
    assert len(inner.requested) == 2


def test_all_failing_gives_empty_set():
    result = AuthAuxiliaryReader(SuffixReader({})).read("/path/to/resource")
    assert result == PermissionSet()


def test_only_read_write_append_control_are_collected():
    inner = SuffixReader(
        {".auth": [AccessMode.CREATE, AccessMode.DELETE, AccessMode.READ], ".webid": []}
    )
    result = AuthAuxiliaryReader(inner).read("/path/to/resource")
    assert result == PermissionSet([AccessMode.READ])


def test_auth_auxiliary_path_is_recognised():
    reader = AuthAuxiliaryReader(SuffixReader({}))
    path = reader.auth_auxiliary_path("/path/to/resource")
    assert path == "/path/to/.auth"
    assert reader.is_auth_auxiliary(path) is True
    assert reader.is_auth_auxiliary("/path/to/resource") is False


def test_auth_resource_is_in_same_directory():
    reader = AuthAuxiliaryReader(SuffixReader({}))
    assert reader.auth_resource("/path/to/resource") == "/path/to/auth"
    assert reader.auth_resource("/a//b/../c") == reader.auth_resource("/a/x")