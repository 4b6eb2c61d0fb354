"""
Command parser for the kubectl simulator.

Turns a raw command string into a Command. Parsing never fails: absent
parts come back empty and the executor decides what is an error.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

logger = logging.getLogger("kubesandbox.executor.parser")

DEFAULT_NAMESPACE = "default"

NAMESPACE_LONG_FLAG = "--namespace"
NAMESPACE_SHORT_FLAG = "-n"

# Short flags that take the next token as their value
VALUE_FLAGS = {NAMESPACE_SHORT_FLAG}


@dataclass(frozen=True)
class Command:
    """A parsed kubectl invocation. Options are exposed read-only."""

    action: str
    resource: str
    name: Optional[str] = None
    namespace: str = DEFAULT_NAMESPACE
    flags: Tuple[str, ...] = ()
    options: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    def __post_init__(self):
        object.__setattr__(self, "flags", tuple(self.flags))
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))


def tokenize(raw: str) -> List[str]:
    """Split on runs of whitespace after trimming."""
    return raw.strip().split()


def _record(options: Dict[str, str], key: str, value: str) -> None:
    # First non-empty value wins; an empty value never shadows a later one
    if not options.get(key):
        options[key] = value


def extract_options(tokens: List[str]) -> Dict[str, str]:
    """
    Build a flag -> value map from command tokens.

    ``--key=value`` maps key to value, a value flag such as ``-n`` takes the
    following token, and any other flag maps to an empty string. The first
    non-empty value of a flag wins.

    Args:
        tokens: All command tokens

    Returns:
        Dictionary of flags and their values
    """
    options: Dict[str, str] = {}

    i = 0
    while i < len(tokens):
        token = tokens[i]

        if token.startswith("--") and "=" in token:
            key, value = token.split("=", 1)
            _record(options, key, value)
        elif token in VALUE_FLAGS:
            if i + 1 < len(tokens):
                _record(options, token, tokens[i + 1])
                i += 1
            else:
                _record(options, token, "")
        elif token.startswith("-"):
            _record(options, token, "")

        i += 1

    return options


def resolve_namespace(options: Mapping[str, str], fallback: Optional[str] = None) -> str:
    """
    Pick the namespace from parsed options.

    ``--namespace=<ns>`` beats ``-n <ns>`` whenever both are given. Empty
    values do not count.
    """
    return (
        options.get(NAMESPACE_LONG_FLAG)
        or options.get(NAMESPACE_SHORT_FLAG)
        or fallback
        or DEFAULT_NAMESPACE
    )


def parse(raw: str, default_namespace: Optional[str] = None) -> Command:
    """
    Parse a raw kubectl command string.

    Token 1 is the action, token 2 the resource and token 3 the name;
    token 0 is the ``kubectl`` prefix and is not inspected here.

    Args:
        raw: Raw command string
        default_namespace: Namespace used when the command names none

    Returns:
        Parsed Command
    """
    tokens = tokenize(raw)
    options = extract_options(tokens)

    command = Command(
        action=tokens[1] if len(tokens) > 1 else "",
        resource=tokens[2] if len(tokens) > 2 else "",
        name=tokens[3] if len(tokens) > 3 else None,
        namespace=resolve_namespace(options, default_namespace),
        flags=tuple(token for token in tokens[4:] if token.startswith("-")),
        options=options,
    )
    logger.debug(f"Parsed {raw!r} -> {command}")
    return command
