# solidauthz

Building blocks for authenticating and authorizing requests against a
Solid-style resource server: credential extractors, access-mode extractors,
permission readers, a permission-based authorizer and a few in-memory
resource helpers. The package has no dependencies outside the standard
library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `solidauthz.credentials`: the frozen dataclasses `Credentials`, `Agent`
  (`web_id`), `Client` (`client_id`) and `Issuer` (`url`); `HttpRequest`, a
  request with `method`, `path`, `headers` and `body`, whose `header(name)`
  looks a header up case-insensitively and returns `""` when it is absent; the
  `CredentialsExtractor` protocol; and the exceptions `CredentialsError`,
  `UnsupportedCredentialsError`, `InvalidTokenError` and `MissingTokenError`.
- `solidauthz.extractors`: credential extractors.
  - `BearerWebIdExtractor` reads `Authorization: Bearer <value>` (scheme
    matched case-insensitively) and uses the value as the WebID.
  - `DPoPWebIdExtractor` reads `Authorization: DPoP <value>`, requires a
    `DPoP` header, asks a `TargetExtractor` for the original URL, and uses the
    value as the WebID.
  - `UnsecureWebIdExtractor` trusts `Authorization: WebID <id>`.
  - `UnsecureConstantCredentialsExtractor` always yields the WebID it was
    given; `PublicCredentialsExtractor` always yields
    `https://example.org/public`.
  - `UnionCredentialsExtractor` combines several extractors, later results
    winning; failing extractors are skipped, and a `CredentialsError` is raised
    only when every extractor fails.
- `solidauthz.permissions`: the `AccessMode` enum (read, write, append, create,
  delete, control), the `AccessMap` alias, and `PermissionSet`, a dict from
  mode to granted flag with `has`, `add`, `remove`, `clear`, `granted`,
  `intersect`, `union` and `difference`. Also the protocols `ModesExtractor`,
  `ResourceSet`, `ExistenceStorage` and `IdentifierStrategy`.
- `solidauthz.modes`: `MethodModesExtractor` (modes from the HTTP method and
  whether the target exists), `CreateModesExtractor` (adds Create for a
  missing target), `DeleteParentExtractor` (adds Read on the parent when
  deleting a missing resource) and `N3PatchModesExtractor`, which collects the
  `solid:where`, `solid:inserts` and `solid:deletes` blocks of the request body
  into an `N3Patch`.
- `solidauthz.intermediate`: `IntermediateCreateExtractor`, the permissions
  needed when a PUT or POST would create missing intermediate containers, and
  `intermediate_paths` to list them.
- `solidauthz.union_modes`: `UnionModesExtractor`, combining the Read, Write,
  Append and Control modes required by several extractors.
- `solidauthz.permission_util`: `required_permissions(request)`,
  `has_required_permissions`, `missing_permissions`, `intersect_permissions`
  and `union_permissions`.
- `solidauthz.readers`: `PermissionReaderInput`, the `PermissionReader`
  protocol, `DefaultPermissionReader` (grants what was requested),
  `AllStaticReader` (grants all of read, write, append, create and delete, or
  nothing), `AuxiliaryReader` (grants what the `.meta` and `.acl` auxiliaries
  grant) and `UnionPermissionReader` (per mode, an explicit `False` beats
  `True` beats no answer; failing readers are skipped).
- `solidauthz.path_reader`: `PathBasedReader`, which sends each resource below
  a base URL to the reader whose regular expression matches its relative path.
- `solidauthz.parent_reader`: `ParentContainerReader`, which grants Create when
  the parent container grants Append and Delete when both the resource and its
  parent grant Write.
- `solidauthz.owner_reader`: `OwnerPermissionReader`, granting full access to
  authorization resources to the owners of the pod holding them, with the
  `Pod`, `Owner`, `PodStore`, `AuxiliaryIdentifierStrategy` and
  `StorageLocationStrategy` types it works with.
- `solidauthz.acl_readers`: `WebACLReader` and `ACPReader`, which load JSON
  `.acl` and `.acp` documents from a `DocumentStorage`, and the `WebACL`
  document type with `from_json`, `to_json` and `permissions`.
- `solidauthz.acp_util`: path helpers for `.acp` files and `acp` resources.
- `solidauthz.auth_auxiliary`: `AuthAuxiliaryReader`, collecting the modes
  granted on a resource's `.auth` and `.webid` auxiliaries.
- `solidauthz.authorizer`: `Permission`, `AgentAccessChecker` (`grant`,
  `check_access`), `PermissionBasedAuthorizer` and the exceptions
  `AuthorizationError`, `UnauthorizedError` and `ForbiddenError`.
- `solidauthz.resources`: the `ACL` and `Access` records, `WebID`, `Account`
  and the in-memory `WebIDStore`, `ResourceIdentifier`, and the
  `GetOperationHandler`, `PutOperationHandler` and `DeleteOperationHandler`
  that work on an `Operation` over a `ResourceStorage` and return a
  `Representation`.

## Example

```python
from solidauthz.credentials import HttpRequest
from solidauthz.extractors import BearerWebIdExtractor, UnionCredentialsExtractor
from solidauthz.permissions import AccessMode, PermissionSet
from solidauthz.readers import AllStaticReader, PermissionReaderInput

request = HttpRequest(
    method="GET",
    path="/notes/today",
    headers={"Authorization": "Bearer token"},
)

credentials = UnionCredentialsExtractor(BearerWebIdExtractor()).extract(request)
print(credentials.agent.web_id)  # "token"

reader = AllStaticReader(True)
granted = reader.read(
    PermissionReaderInput(
        credentials=credentials,
        requested_modes={"/notes/today": PermissionSet()},
    )
)
print(granted["/notes/today"].has(AccessMode.READ))  # True
```

`PermissionBasedAuthorizer.authorize(request)` raises `UnauthorizedError` when
the request has no `X-WebID` header, and `ForbiddenError` when a Read, Write,
Append or Control mode the extractor requires is not granted by the reader.

## What it does not do

- It is a library only: there is no server and no command to run.
- It does not verify tokens. The Bearer and DPoP extractors take the token
  value itself as the WebID and do not check signatures or the DPoP proof.
- It provides no storage backends. Storage, pod stores and identifier
  strategies are protocols that the caller implements; only `WebIDStore` keeps
  data, and only in memory.
- ACL and ACP documents are read as JSON, not as RDF.