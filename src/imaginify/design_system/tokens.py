"""Token lookup policy shared by every token store.

Design tokens are immutable constants. What happens when code asks for a
token that does not exist is a policy decision:

- ``fallback``: return a fixed default and log a ``token_fallback`` warning
- ``strict``: raise UnknownTokenError

The default comes from settings (IMG_TOKEN_LOOKUP_POLICY) and can be
overridden per call or for a block of code with ``lookup_policy()``.
"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from enum import Enum
from typing import TypeVar

from imaginify.config import get_settings
from imaginify.exceptions import UnknownTokenError
from imaginify.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class TokenLookupPolicy(str, Enum):
    """How unknown token keys are handled."""

    FALLBACK = "fallback"
    STRICT = "strict"


_policy_override: ContextVar[TokenLookupPolicy | None] = ContextVar(
    "token_lookup_policy", default=None
)


def current_policy() -> TokenLookupPolicy:
    """Get the policy in effect: scoped override first, then settings."""
    override = _policy_override.get()
    if override is not None:
        return override
    return TokenLookupPolicy(get_settings().token_lookup_policy)


@contextmanager
def lookup_policy(policy: TokenLookupPolicy | str) -> Iterator[TokenLookupPolicy]:
    """Apply a lookup policy to every token lookup inside the block.

    Example:
        with lookup_policy("strict"):
            get_spacing("typo")  # raises UnknownTokenError
    """
    resolved = TokenLookupPolicy(policy)
    token = _policy_override.set(resolved)
    try:
        yield resolved
    finally:
        _policy_override.reset(token)


def lookup(
    kind: str,
    table: Mapping[str, T],
    key: str,
    default: T,
    policy: TokenLookupPolicy | str | None = None,
) -> T:
    """Look a key up in a token table under the active policy.

    Args:
        kind: Token family name used in logs and errors ("spacing", "color").
        table: The token table.
        key: Requested key.
        default: Value returned for unknown keys under the fallback policy.
        policy: Explicit policy for this call; None uses current_policy().

    Raises:
        UnknownTokenError: If the key is unknown and the policy is strict.
    """
    try:
        return table[key]
    except KeyError:
        pass

    effective = TokenLookupPolicy(policy) if policy is not None else current_policy()
    if effective is TokenLookupPolicy.STRICT:
        raise UnknownTokenError(kind, key)

    logger.warning("token_fallback", kind=kind, key=key, fallback=str(default))
    return default
