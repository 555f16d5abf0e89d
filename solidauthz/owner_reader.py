"""A permission reader granting pod owners full access to authorization resources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol

from .permissions import AccessMode, PermissionSet
from .readers import PermissionMap, PermissionReaderInput

_OWNER_MODES = (
    AccessMode.READ,
    AccessMode.WRITE,
    AccessMode.APPEND,
    AccessMode.CREATE,
    AccessMode.DELETE,
)


@dataclass(frozen=True)
class Pod:
    """A pod, identified by its id and rooted at a base URL."""

    id: str
    base_url: str = ""


@dataclass(frozen=True)
class Owner:
    """An owner of a pod, identified by WebID."""

    web_id: str


class PodStore(Protocol):
    """Looks up pods and their owners."""

    def find_by_base_url(self, base_url: str) -> Pod | None:
        """The pod rooted at the base URL, or None."""
        ...

    def get_owners(self, pod_id: str) -> Iterable[Owner]:
        """The owners of the pod."""
        ...


class AuxiliaryIdentifierStrategy(Protocol):
    """Recognises auxiliary resource identifiers."""

    def is_auxiliary_identifier(self, identifier: str) -> bool:
        """Whether the identifier names an auxiliary resource."""
        ...


class StorageLocationStrategy(Protocol):
    """Finds the storage root containing a resource."""

    def get_storage_identifier(self, identifier: str) -> str:
        """The storage root of the identifier; raises when there is none."""
        ...


class OwnerPermissionReader:
    """Grants full access to authorization resources when the requester owns the pod."""

    def __init__(
        self,
        pod_store: PodStore,
        auth_strategy: AuxiliaryIdentifierStrategy,
        storage_strategy: StorageLocationStrategy,
    ) -> None:
        self.pod_store = pod_store
        self.auth_strategy = auth_strategy
        self.storage_strategy = storage_strategy

    def read(self, request: PermissionReaderInput) -> PermissionMap:
        auths = [
            resource
            for resource in request.requested_modes
            if self.auth_strategy.is_auxiliary_identifier(resource)
        ]
        if not auths:
            return {}

        credentials = request.credentials
        web_id = credentials.agent.web_id if credentials and credentials.agent else ""
        if not web_id:
            return {}

        pods = self._find_pods(auths)
        owners = self._find_owners(set(pods.values()))

        result: PermissionMap = {}
        for auth in auths:
            pod = pods.get(auth)
            if pod is not None and web_id in owners.get(pod, ()):
                result[auth] = PermissionSet(_OWNER_MODES)
        return result

    def _find_pods(self, identifiers: list[str]) -> dict[str, str]:
        """The pod of each identifier; identifiers without one are left out."""
        pods: dict[str, str] = {}
        for identifier in identifiers:
            try:
                pods[identifier] = self.storage_strategy.get_storage_identifier(identifier)
            except Exception:
                continue
        return pods

    def _find_owners(self, base_urls: set[str]) -> dict[str, list[str]]:
        """The WebIDs owning each pod; pods that cannot be looked up are left out."""
        owners: dict[str, list[str]] = {}
        for base_url in base_urls:
            try:
                pod = self.pod_store.find_by_base_url(base_url)
                if pod is None:
                    continue
                pod_owners = self.pod_store.get_owners(pod.id)
            except Exception:
                continue
            owners[base_url] = [owner.web_id for owner in pod_owners or ()]
        return owners