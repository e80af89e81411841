"""
Builds the CDK app for the Docker repository.

`build_app` resolves all context values before declaring anything, so a
missing accountId or region never leaves a half-built app behind.
"""

import logging
from typing import Any, Mapping, Optional

import aws_cdk as cdk
from .docker_repository_stack import DockerRepositoryStack
from .shared.context import resolve_app_config

logger = logging.getLogger(__name__)


def build_app(
    context: Optional[Mapping[str, Any]] = None,
    app: Optional[cdk.App] = None,
) -> cdk.App:
    """
    Create the app and declare the Docker repository stack on it.

    Args:
        context: Context values for a new app. Ignored when `app` is given.
        app: Existing app to declare the stack on. When omitted, a new app is
            created; the CDK CLI supplies its --context values to it.

    Returns:
        The app, ready for synth()

    Raises:
        MissingConfigurationError: If accountId or region is missing or empty
    """
    if app is None:
        app = cdk.App(context=dict(context) if context is not None else None)

    config = resolve_app_config(app.node)

    logger.info(
        f"Declaring {config.stack_id}: repository {config.repository_name} "
        f"in {config.environment.account}/{config.environment.region}"
    )

    DockerRepositoryStack(
        app,
        config.stack_id,
        repository_name=config.repository_name,
        env=config.environment.to_cdk(),
        description=f"ECR repository {config.repository_name} for Docker images",
    )

    return app
