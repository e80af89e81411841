"""
Tests for the DockerRepository construct.
"""

import sys
import os
import json
import pytest

# Add infrastructure to path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '../..'))
infrastructure_path = os.path.join(project_root, 'infrastructure')
if infrastructure_path not in sys.path:
    sys.path.insert(0, infrastructure_path)

import aws_cdk as cdk

from stacks.docker_repository import DockerRepository, DockerRepositoryInputParameters

ENV = cdk.Environment(account="111122223333", region="us-east-1")


def _synth(parameters, environment=ENV):
    app = cdk.App()
    stack = cdk.Stack(app, "TestStack", env=ENV)
    construct = DockerRepository(stack, "repo", environment, parameters)
    template = app.synth().get_stack_by_name("TestStack").template
    repositories = [
        v for v in template['Resources'].values()
        if v['Type'] == 'AWS::ECR::Repository'
    ]
    assert len(repositories) == 1
    return construct, repositories[0]


def test_retention_count_in_lifecycle_rule():
    _, repository = _synth(DockerRepositoryInputParameters(
        repository_name="retention-repo",
        owner_account_id="111122223333",
        retention_count=25,
    ))
    lifecycle = json.loads(repository['Properties']['LifecyclePolicy']['LifecyclePolicyText'])
    rule = lifecycle['rules'][0]
    assert rule['description'] == "Keep last 25 images"
    assert rule['selection']['countNumber'] == 25
    assert rule['action']['type'] == 'expire'


def test_default_retention_is_ten():
    parameters = DockerRepositoryInputParameters(repository_name="repo")
    assert parameters.retention_count == 10
    assert parameters.retain_on_delete is True


def test_destroy_when_not_retained():
    _, repository = _synth(DockerRepositoryInputParameters(
        repository_name="ephemeral-repo",
        retain_on_delete=False,
    ))
    assert repository['DeletionPolicy'] == 'Delete'


def test_owner_defaults_to_environment_account():
    construct, repository = _synth(DockerRepositoryInputParameters(repository_name="repo"))
    assert construct.owner_account_id == "111122223333"
    principal = repository['Properties']['RepositoryPolicyText']['Statement'][0]['Principal']
    assert "111122223333" in json.dumps(principal)


def test_explicit_owner_account():
    construct, repository = _synth(DockerRepositoryInputParameters(
        repository_name="shared-repo",
        owner_account_id="444455556666",
    ))
    assert construct.owner_account_id == "444455556666"
    principal = repository['Properties']['RepositoryPolicyText']['Statement'][0]['Principal']
    assert "444455556666" in json.dumps(principal)


def test_parameter_validation():
    app = cdk.App()
    stack = cdk.Stack(app, "TestStack", env=ENV)

    with pytest.raises(ValueError, match="repository_name must not be empty"):
        DockerRepository(stack, "Test1", ENV, DockerRepositoryInputParameters(repository_name=""))

    with pytest.raises(ValueError, match="retention_count must be at least 1"):
        DockerRepository(stack, "Test2", ENV, DockerRepositoryInputParameters(
            repository_name="repo", retention_count=0
        ))

    with pytest.raises(ValueError, match="owner_account_id must be set"):
        DockerRepository(
            stack, "Test3",
            cdk.Environment(region="us-east-1"),
            DockerRepositoryInputParameters(repository_name="repo")
        )
