"""
Pytest configuration and fixtures for ecsdeploy tests.
"""

import copy
import os

import pytest
import yaml
from botocore.exceptions import ClientError
from unittest.mock import Mock

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


@pytest.fixture
def client_error():
    """Factory for botocore ClientError instances."""
    def make(operation, code="AccessDeniedException", message="denied"):
        return ClientError({"Error": {"Code": code, "Message": message}}, operation)
    return make


@pytest.fixture
def task_yml_path():
    return os.path.join(FIXTURES_DIR, "task.yml")


@pytest.fixture
def task_definition(task_yml_path):
    """Parsed fixture task definition."""
    with open(task_yml_path, "r") as stream:
        return yaml.safe_load(stream)


@pytest.fixture
def task_definition_with_encrypt(task_definition):
    """Fixture task definition with numeric, plain and encrypted values appended."""
    task_def = copy.deepcopy(task_definition)
    task_def["containerDefinitions"][0]["environment"] += [
        {"name": "NUMERIC_VALUE", "value": 0},
        {"name": "STRING_VALUE", "value": "STRING"},
        {"name": "ENCRYPTED_VALUE", "value": "${ZW5jcnlwdGVkX3ZhbHVl}"},
    ]
    return task_def


@pytest.fixture
def kms_client():
    """Mock boto3 KMS client."""
    client = Mock()
    client.encrypt.return_value = {"CiphertextBlob": b"encrypted_value", "KeyId": "master_key"}
    client.decrypt.return_value = {"Plaintext": b"decrypted_value"}
    return client


@pytest.fixture
def ecs_client():
    """Mock boto3 ECS client."""
    return Mock()
