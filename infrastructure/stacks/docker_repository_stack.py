"""
Stack for the Docker image repository.

Declares exactly one DockerRepository, owned by the account the stack is
deployed to.
"""

from aws_cdk import (
    Stack,
    Tags,
    Token,
)
from constructs import Construct
from .docker_repository import DockerRepository, DockerRepositoryInputParameters
from .shared.constants import DEFAULT_RETENTION_COUNT


class DockerRepositoryStack(Stack):
    """
    CDK Stack holding a single Docker image repository.

    The stack must be bound to a concrete account, since that account is
    granted push/pull access to the repository.
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        repository_name: str,
        **kwargs
    ) -> None:
        """
        Initialize the Docker repository stack.

        Args:
            scope: CDK construct scope
            construct_id: Unique identifier for this stack
            repository_name: Name of the ECR repository
            **kwargs: Additional stack properties (must include env)
        """
        super().__init__(scope, construct_id, **kwargs)

        if Token.is_unresolved(self.account):
            raise ValueError("DockerRepositoryStack requires an env with a concrete account")

        # Add tags
        Tags.of(self).add("Service", "docker-repository")
        Tags.of(self).add("ManagedBy", "CDK")

        self.docker_repository = DockerRepository(
            self,
            "repo",
            kwargs["env"],
            DockerRepositoryInputParameters(
                repository_name=repository_name,
                owner_account_id=self.account,
                retention_count=DEFAULT_RETENTION_COUNT,
            ),
        )
        self.repository = self.docker_repository.repository
