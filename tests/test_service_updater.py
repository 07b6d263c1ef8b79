"""
Tests for updating a service to a cloned task definition.
"""

import pytest
from unittest.mock import Mock

from ecsdeploy.deploy.ecs_objects import DeploymentIdentity
from ecsdeploy.deploy.service_updater import ServiceUpdater
from ecsdeploy.exceptions import UpdateError

IDENTITY = DeploymentIdentity("family", "revision", "new_task_definition_arn")


@pytest.fixture
def updater(ecs_client):
    registrar = Mock()
    registrar.register_clone.return_value = IDENTITY
    ecs_client.update_service.return_value = {"service": {"serviceArn": "service_arn"}}
    return ServiceUpdater(ecs_client, registrar, Mock())


class TestUpdate:

    def test_wait(self, updater, ecs_client):
        assert updater.update("cluster", "service", True) == "service_arn"
        updater.registrar.register_clone.assert_called_once_with("cluster", "service")
        ecs_client.update_service.assert_called_once_with(
            cluster="cluster", service="service", taskDefinition="new_task_definition_arn"
        )
        updater.monitor.wait_for_deploy.assert_called_once_with("cluster", "service", IDENTITY)

    def test_no_wait(self, updater):
        assert updater.update("cluster", "service", False) == "service_arn"
        updater.registrar.register_clone.assert_called_once_with("cluster", "service")
        updater.monitor.wait_for_deploy.assert_not_called()

    def test_update_error(self, updater, ecs_client, client_error):
        ecs_client.update_service.side_effect = client_error("UpdateService", code="ServiceNotActiveException")
        with pytest.raises(UpdateError):
            updater.update("cluster", "service", True)
        updater.monitor.wait_for_deploy.assert_not_called()
