# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
import botocore.exceptions
from ..exceptions import UpdateError
import logging

logger = logging.getLogger(__name__)

class ServiceUpdater:
    """Points a service at a fresh clone of its own task definition."""

    def __init__(self, ecs_client, registrar, monitor):
        self.ecs_client = ecs_client
        self.registrar = registrar
        self.monitor = monitor

    def update(self, cluster, service_name, wait=True):
        identity = self.registrar.register_clone(cluster, service_name)
        try:
            response = self.ecs_client.update_service(
                cluster=cluster,
                service=service_name,
                taskDefinition=identity.task_definition_arn
            )
        except (botocore.exceptions.ClientError, botocore.exceptions.BotoCoreError) as error:
            logger.error("Unable to update %s service %s"%(service_name, error))
            raise UpdateError("Unable to update %s service in %s cluster: %s"%(service_name, cluster, error)) from error
        service_arn = response.get("service",{}).get("serviceArn")
        logger.info("Updated %s service to %s"%(service_arn, identity.task_definition_arn))
        if wait:
            self.monitor.wait_for_deploy(cluster, service_name, identity)
        return service_arn
