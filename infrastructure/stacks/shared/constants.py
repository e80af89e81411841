"""
Shared constants for the Docker repository infrastructure.

This module contains constants that are used across the app entrypoint,
the context resolver and the stacks.
"""

# Context keys (passed as `cdk synth --context key=value`)
ACCOUNT_ID_CONTEXT_KEY = "accountId"
REGION_CONTEXT_KEY = "region"
REPOSITORY_NAME_CONTEXT_KEY = "repoName"

# Repository name used when no repoName context value is supplied
DEFAULT_REPOSITORY_NAME = "hello-world-repo"

# Number of images kept in the repository. Older images are expired by the
# ECR lifecycle policy, which bounds storage cost per repository.
DEFAULT_RETENTION_COUNT = 10

# Construct ID of the single stack declared by the app
DEFAULT_STACK_ID = "DockerRepositoryStack"
