"""Authorization decisions: access checks and a permission-based authorizer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol

from .credentials import HttpRequest
from .permissions import AccessMode, ModesExtractor, PermissionSet

_CHECKED_MODES = (AccessMode.READ, AccessMode.WRITE, AccessMode.APPEND, AccessMode.CONTROL)


@dataclass(frozen=True)
class Permission:
    """The access privileges an agent holds on a resource."""

    read: bool = False
    write: bool = False
    append: bool = False
    control: bool = False


class AuthorizationError(Exception):
    """Raised when a request is not authorized."""

    default_message = "authorization error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class UnauthorizedError(AuthorizationError):
    """The requester is not identified, or not known."""

    default_message = "unauthorized"


class ForbiddenError(AuthorizationError):
    """The requester lacks a required permission."""

    default_message = "forbidden"


class AgentAccessChecker:
    """Grants access to agents that have been given permissions."""

    def __init__(self) -> None:
        self._permissions: dict[str, dict[str, Permission]] = {}

    def grant(self, agent: str, resource: str, permission: Permission) -> None:
        """Record the agent's permission on the resource."""
        self._permissions.setdefault(agent, {})[resource] = permission

    def check_access(self, agent: str, resource: str, permission: Permission) -> None:
        """Raise UnauthorizedError unless the agent has been given any permissions."""
        if agent not in self._permissions:
            raise UnauthorizedError()


class _ResourcePermissionReader(Protocol):
    def read(self, resource: str) -> PermissionSet: ...


def _required_modes(extracted: Any, target: str) -> set[AccessMode]:
    """The modes an extractor requires on the target, from a permission set or access map."""
    if isinstance(extracted, PermissionSet):
        return set(extracted.granted())
    if isinstance(extracted, Mapping):
        modes = extracted.get(target, ())
        if isinstance(modes, PermissionSet):
            return set(modes.granted())
        return set(modes)
    return set()


class PermissionBasedAuthorizer:
    """Authorizes a request when the resource grants every Read, Write, Append or
    Control mode the request needs."""

    def __init__(
        self,
        access_checker: AgentAccessChecker,
        mode_extractor: ModesExtractor,
        reader: _ResourcePermissionReader,
    ) -> None:
        self.access_checker = access_checker
        self.mode_extractor = mode_extractor
        self.reader = reader

    def authorize(self, request: HttpRequest) -> None:
        """Raise UnauthorizedError or ForbiddenError if the request may not proceed."""
        if not request.header("X-WebID"):
            raise UnauthorizedError()

        required = _required_modes(self.mode_extractor.extract(request), request.path)
        perms = self.reader.read(request.path)

        for mode in _CHECKED_MODES:
            if mode in required and not perms.has(mode):
                raise ForbiddenError()