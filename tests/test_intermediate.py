import pytest

from solidauthz.credentials import HttpRequest
from solidauthz.intermediate import IntermediateCreateExtractor
from solidauthz.permissions import AccessMode, PermissionSet


class _Storage:
    def __init__(self, *paths):
        self.paths = set(paths)
        self.checked = []

    def exists(self, path):
        self.checked.append(path)
        return path in self.paths


def test_put_with_missing_intermediates_needs_write():
    extractor = IntermediateCreateExtractor(_Storage())
    result = extractor.extract(HttpRequest(method="PUT", path="/a/b/c"))
    assert set(result.granted()) == {AccessMode.WRITE}


def test_post_with_missing_intermediates_needs_write_and_append():
    extractor = IntermediateCreateExtractor(_Storage())
    result = extractor.extract(HttpRequest(method="POST", path="/a/b/c"))
    assert set(result.granted()) == {AccessMode.WRITE, AccessMode.APPEND}


@pytest.mark.parametrize("content_type", ["text/n3", "application/sparql-update"])
def test_patch_content_types_need_append_and_control(content_type):
    extractor = IntermediateCreateExtractor(_Storage())
    request = HttpRequest(method="PUT", path="/a/b/c", headers={"Content-Type": content_type})
    assert set(extractor.extract(request).granted()) == {
        AccessMode.WRITE,
        AccessMode.APPEND,
        AccessMode.CONTROL,
    }


def test_link_type_header_needs_control():
    extractor = IntermediateCreateExtractor(_Storage())
    request = HttpRequest(method="PUT", path="/a/b/c", headers={"Link": '<#x>; rel="type"'})
    assert set(extractor.extract(request).granted()) == {AccessMode.WRITE, AccessMode.CONTROL}


def test_existing_intermediates_need_nothing():
    extractor = IntermediateCreateExtractor(_Storage("a", "a/b"))
    request = HttpRequest(method="PUT", path="/a/b/c")
    assert extractor.is_intermediate_create_request(request) is False
    assert extractor.extract(request) == PermissionSet()


def test_read_request_needs_nothing():
    extractor = IntermediateCreateExtractor(_Storage())
    request = HttpRequest(method="GET", path="/a/b/c")
    assert extractor.is_intermediate_create_request(request) is False
    assert extractor.extract(request) == PermissionSet()


def test_shallow_path_is_not_intermediate_create():
    storage = _Storage()
    extractor = IntermediateCreateExtractor(storage)
    request = HttpRequest(method="PUT", path="/a")
    assert extractor.is_intermediate_create_request(request) is False
    assert storage.checked == []


@pytest.mark.parametrize(("method", "expected"), [("PUT", True), ("POST", True), ("GET", False), ("DELETE", False)])
def test_is_create_request(method, expected):
    extractor = IntermediateCreateExtractor(_Storage())
    assert extractor.is_create_request(HttpRequest(method=method)) is expected


def test_intermediate_paths_all_missing():
    extractor = IntermediateCreateExtractor(_Storage())
    assert extractor.intermediate_paths("/a/b/c") == ["a", "a/b"]


def test_intermediate_paths_skip_existing():
    extractor = IntermediateCreateExtractor(_Storage("a"))
    assert extractor.intermediate_paths("/a/b/c") == ["a/b"]


def test_intermediate_paths_none_missing():
    storage = _Storage("a", "a/b")
    extractor = IntermediateCreateExtractor(storage)
    assert extractor.intermediate_paths("/a/b/c") == []
    assert storage.checked == ["a", "a/b"]


def test_intermediate_paths_agree_with_request_check():
    storage = _Storage("a")
    extractor = IntermediateCreateExtractor(storage)
    request = HttpRequest(method="PUT", path="/a/b/c")
    assert extractor.is_intermediate_create_request(request) is bool(
        extractor.intermediate_paths(request.path)
    )