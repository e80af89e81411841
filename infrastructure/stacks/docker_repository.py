"""
Construct for a Docker image repository in ECR.

Wraps an ECR repository with an image-count retention policy and grants the
owning account permission to push and pull images.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from aws_cdk import (
    Environment,
    RemovalPolicy,
    aws_ecr as ecr,
    aws_iam as iam,
)
from constructs import Construct
from .shared.constants import DEFAULT_RETENTION_COUNT

logger = logging.getLogger(__name__)

PULL_ACTIONS = [
    "ecr:BatchCheckLayerAvailability",
    "ecr:GetDownloadUrlForLayer",
    "ecr:BatchGetImage",
]

PUSH_ACTIONS = [
    "ecr:PutImage",
    "ecr:InitiateLayerUpload",
    "ecr:UploadLayerPart",
    "ecr:CompleteLayerUpload",
]


@dataclass(frozen=True)
class DockerRepositoryInputParameters:
    """
    Input parameters for a DockerRepository.

    Attributes:
        repository_name: Name of the ECR repository
        owner_account_id: Account granted push/pull access. Defaults to the
            account of the environment passed to the construct.
        retention_count: Number of images kept before older ones expire
        retain_on_delete: Keep the repository when the stack is deleted
    """
    repository_name: str
    owner_account_id: Optional[str] = None
    retention_count: int = DEFAULT_RETENTION_COUNT
    retain_on_delete: bool = True


class DockerRepository(Construct):
    """
    An ECR repository for Docker images.

    Images beyond `retention_count` are expired by a lifecycle rule, and the
    owner account gets pull/push access through the repository policy.
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        environment: Environment,
        parameters: DockerRepositoryInputParameters,
    ) -> None:
        """
        Initialize the Docker repository.

        Args:
            scope: CDK construct scope
            construct_id: Unique identifier for this construct
            environment: Environment the repository is deployed to
            parameters: Repository name, owner account and retention settings
        """
        super().__init__(scope, construct_id)

        if not parameters.repository_name:
            raise ValueError("repository_name must not be empty")

        if parameters.retention_count < 1:
            raise ValueError(f"retention_count must be at least 1, got: {parameters.retention_count}")

        self.owner_account_id = parameters.owner_account_id or environment.account
        if not self.owner_account_id:
            raise ValueError("owner_account_id must be set when the environment has no account")

        self.repository = ecr.Repository(
            self,
            "Repository",
            repository_name=parameters.repository_name,
            lifecycle_rules=[
                ecr.LifecycleRule(
                    description=f"Keep last {parameters.retention_count} images",
                    max_image_count=parameters.retention_count,
                )
            ],
            removal_policy=RemovalPolicy.RETAIN if parameters.retain_on_delete else RemovalPolicy.DESTROY,
        )

        self.repository.add_to_resource_policy(
            iam.PolicyStatement(
                sid="OwnerAccountPullPush",
                effect=iam.Effect.ALLOW,
                principals=[iam.AccountPrincipal(self.owner_account_id)],
                actions=PULL_ACTIONS + PUSH_ACTIONS,
            )
        )

        logger.debug(
            f"Declared Docker repository {parameters.repository_name} "
            f"(owner {self.owner_account_id}, keeping {parameters.retention_count} images)"
        )
