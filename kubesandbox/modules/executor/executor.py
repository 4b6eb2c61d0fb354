"""
Executor for the kubectl simulator.

Maps a parsed command to a handler through a route table keyed by
(action, canonical kind), reads the catalog and formats the result.
execute() is a pure function of its input and the injected catalog.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from kubesandbox.modules.catalog import DEFAULT_CATALOG, Catalog

from .command_parser import Command, parse
from .errors import (
    SUPPORTED_ACTIONS,
    CommandRequiredError,
    InternalExecutionError,
    InvalidCommandPrefixError,
    KubectlError,
    MissingActionError,
    MissingResourceError,
    MissingResourceOrNameError,
    NotFoundError,
    NotImplementedResourceError,
    UnknownActionError,
    UnknownResourceError,
)
from .formatting import (
    API_RESOURCES,
    APPLY_CONFIRMATION,
    CLUSTER_INFO,
    VERSION,
    render_deleted,
    render_no_resources,
    render_pod_description,
    render_summary,
    render_table,
)

logger = logging.getLogger("kubesandbox.executor")

COMMAND_PREFIX = "kubectl"

# Route key matching any resource for an action
ANY_KIND = "*"

ALL_KIND = "all"

# Actions that need both a resource type and a name
NAMED_ACTIONS = {"describe", "delete"}

Handler = Callable[[Command, str], str]


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of one simulated kubectl invocation."""

    success: bool
    output: str = ""
    error: Optional[str] = None


class KubectlExecutor:
    """Executes simulated kubectl commands against a read-only catalog."""

    def __init__(self, catalog: Catalog = DEFAULT_CATALOG):
        """
        Initialize executor.

        Args:
            catalog: Resource snapshot to answer from
        """
        self.catalog = catalog
        self._routes = self._build_routes()

    def _build_routes(self) -> Dict[Tuple[str, str], Handler]:
        """Build the (action, kind) -> handler table."""
        routes: Dict[Tuple[str, str], Handler] = {
            ("get", ALL_KIND): self._get_all,
            ("get", ANY_KIND): self._get_unknown,
            ("describe", ANY_KIND): self._describe_unsupported,
            ("apply", ANY_KIND): self._apply,
            ("delete", ANY_KIND): self._delete,
            ("cluster-info", ANY_KIND): lambda command, kind: CLUSTER_INFO,
            ("version", ANY_KIND): lambda command, kind: VERSION,
            ("api-resources", ANY_KIND): lambda command, kind: API_RESOURCES,
        }

        for kind in self.catalog.kinds:
            routes[("get", kind.name)] = self._get_resources

        if self.catalog.get_kind("pods"):
            routes[("describe", "pods")] = self._describe_pod

        return routes

    def execute(self, raw: str, namespace: Optional[str] = None) -> ExecutionResult:
        """
        Execute a raw kubectl command string.

        Never raises: every failure, expected or not, comes back as an
        unsuccessful ExecutionResult.

        Args:
            raw: Command string, e.g. "kubectl get pods"
            namespace: Namespace to use when the command names none

        Returns:
            ExecutionResult
        """
        try:
            self._check_prefix(raw)
            command = parse(raw, default_namespace=namespace)
            output = self.dispatch(command)
        except KubectlError as e:
            logger.info(f"Command {raw!r} rejected: {e.message}")
            return ExecutionResult(success=False, error=e.message)
        except Exception as e:
            logger.exception(f"Unexpected error executing {raw!r}")
            return ExecutionResult(success=False, error=InternalExecutionError(e).message)

        logger.debug(f"Command {raw!r} succeeded")
        return ExecutionResult(success=True, output=output)

    def dispatch(self, command: Command) -> str:
        """
        Route a parsed command to its handler.

        Raises:
            KubectlError: For any invalid command
        """
        if not command.action:
            raise MissingActionError()
        if command.action not in SUPPORTED_ACTIONS:
            raise UnknownActionError(command.action)

        if command.action == "get" and not command.resource:
            raise MissingResourceError()
        if command.action in NAMED_ACTIONS and not (command.resource and command.name):
            raise MissingResourceOrNameError(command.action)

        kind = self.catalog.normalize_kind(command.resource) or command.resource
        handler = self._routes.get((command.action, kind)) or self._routes[
            (command.action, ANY_KIND)
        ]
        return handler(command, kind)

    def _check_prefix(self, raw: str) -> None:
        if not raw or not raw.strip():
            raise CommandRequiredError()
        if not raw.strip().startswith(COMMAND_PREFIX):
            raise InvalidCommandPrefixError()

    # Handlers

    def _get_resources(self, command: Command, kind: str) -> str:
        records = self.catalog.lookup(kind, command.name)
        if not records:
            return render_no_resources(command.namespace)
        return render_table(self.catalog.get_kind(kind), records)

    def _get_all(self, command: Command, kind: str) -> str:
        counts = [
            (resource_kind.label, self.catalog.count(resource_kind.name))
            for resource_kind in self.catalog.kinds
            if resource_kind.namespaced
        ]
        return render_summary(command.namespace, counts)

    def _get_unknown(self, command: Command, kind: str) -> str:
        raise UnknownResourceError(command.resource)

    def _describe_pod(self, command: Command, kind: str) -> str:
        matches = self.catalog.lookup(kind, command.name)
        if not matches:
            raise NotFoundError(kind, command.name)
        return render_pod_description(matches[0], command.namespace)

    def _describe_unsupported(self, command: Command, kind: str) -> str:
        raise NotImplementedResourceError(command.resource)

    def _apply(self, command: Command, kind: str) -> str:
        # Simulated: the catalog is never touched
        return APPLY_CONFIRMATION

    def _delete(self, command: Command, kind: str) -> str:
        # Simulated: succeeds whether or not the record exists
        return render_deleted(command.resource, command.name)
