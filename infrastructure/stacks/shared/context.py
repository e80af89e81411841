"""
Context resolution for the Docker repository app.

Configuration comes from CDK context values, supplied on the command line
(`cdk synth --context accountId=111122223333 --context region=us-east-1`),
through cdk.json, or as a plain mapping when the app is built in tests.

Required values fail fast: a missing or empty accountId or region is a fatal
configuration error, raised before any stack is declared.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

import aws_cdk as cdk
from constructs import Node

from .constants import (
    ACCOUNT_ID_CONTEXT_KEY,
    REGION_CONTEXT_KEY,
    REPOSITORY_NAME_CONTEXT_KEY,
    DEFAULT_REPOSITORY_NAME,
    DEFAULT_STACK_ID,
)

logger = logging.getLogger(__name__)

ContextSource = Union[Mapping[str, Any], Node]


class MissingConfigurationError(ValueError):
    """Raised when a required context value is missing or empty."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"context variable '{key}' must not be null or empty")


@dataclass(frozen=True)
class EnvironmentDescriptor:
    """Account and region the stack is deployed to."""
    account: str
    region: str

    def to_cdk(self) -> cdk.Environment:
        return cdk.Environment(account=self.account, region=self.region)


@dataclass(frozen=True)
class AppConfig:
    """Fully resolved configuration for one app run."""
    environment: EnvironmentDescriptor
    repository_name: str
    stack_id: str = DEFAULT_STACK_ID


def _lookup(context: ContextSource, key: str) -> Any:
    if hasattr(context, "try_get_context"):
        return context.try_get_context(key)
    return context.get(key)


def _normalize(value: Any) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def require_context(context: ContextSource, key: str) -> str:
    """
    Get a required context value.

    Args:
        context: Context mapping or CDK construct node
        key: Context key (e.g., 'accountId', 'region')

    Returns:
        The value as a string

    Raises:
        MissingConfigurationError: If the value is missing, None or empty
    """
    value = _normalize(_lookup(context, key))
    if value is None:
        raise MissingConfigurationError(key)
    logger.debug(f"Resolved context variable '{key}'")
    return value


def optional_context(context: ContextSource, key: str, default: str) -> str:
    """Get a context value, falling back to `default` when missing or empty."""
    value = _normalize(_lookup(context, key))
    if value is None:
        logger.debug(f"Context variable '{key}' not set, using default: {default}")
        return default
    return value


def resolve_environment(context: ContextSource) -> EnvironmentDescriptor:
    """
    Build the deployment environment from the accountId and region values.

    The account is checked first, so a context missing both reports accountId.
    """
    account = require_context(context, ACCOUNT_ID_CONTEXT_KEY)
    region = require_context(context, REGION_CONTEXT_KEY)
    return EnvironmentDescriptor(account=account, region=region)


def resolve_app_config(context: ContextSource) -> AppConfig:
    """Resolve the environment and repository name for one app run."""
    environment = resolve_environment(context)
    repository_name = optional_context(
        context, REPOSITORY_NAME_CONTEXT_KEY, DEFAULT_REPOSITORY_NAME
    )
    return AppConfig(environment=environment, repository_name=repository_name)
