"""Credential extractors, access-mode extractors, permission readers and an authorizer
for Solid-style resource servers."""

__version__ = "0.1.0"

__all__ = [
    "acl_readers",
    "acp_util",
    "auth_auxiliary",
    "authorizer",
    "credentials",
    "extractors",
    "intermediate",
    "modes",
    "owner_reader",
    "parent_reader",
    "path_reader",
    "permission_util",
    "permissions",
    "readers",
    "resources",
    "union_modes",
]