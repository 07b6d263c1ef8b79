# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
import os
import yaml
import botocore.exceptions
from .ecs_objects import DeploymentIdentity, validate_task_definition, registrable_task_def
from ..exceptions import NotFoundError, ValidationError, ServiceNotFoundError, RegistrationError
import logging

logger = logging.getLogger(__name__)

# reads a YAML or JSON task definition file, JSON parses as YAML
def read_task_definition(path):
    if not os.path.isfile(path):
        raise NotFoundError(path)
    logger.info("Reading task definition from %s file"%(path))
    with open(path, 'r') as input_stream:
        try:
            task_def = yaml.safe_load(input_stream)
        except yaml.YAMLError as error:
            raise ValidationError("Error reading %s task definition file %s"%(path, error)) from error
    return validate_task_definition(task_def)

def find_service(services, service_name):
    for svc in services:
        if svc.get("serviceName") == service_name:
            return svc
    return None

class TaskRegistrar:

    def __init__(self, ecs_client, resolver):
        self.ecs_client = ecs_client
        self.resolver = resolver

    def register_from_document(self, task_def, tags=None):
        resolved = self.resolver.resolve(task_def)
        request = registrable_task_def(resolved, tags)
        try:
            response = self.ecs_client.register_task_definition(**request)
        except (botocore.exceptions.ClientError, botocore.exceptions.BotoCoreError) as error:
            logger.error("Unable to register %s task definition %s"%(request.get("family",""), error))
            raise RegistrationError("Unable to register %s task definition: %s"%(request.get("family",""), error)) from error
        registered = response.get("taskDefinition",{})
        identity = DeploymentIdentity(
            family=registered.get("family"),
            revision=registered.get("revision"),
            task_definition_arn=registered.get("taskDefinitionArn"))
        logger.info("Registered task definition %s"%(identity.task_definition_arn))
        return identity

    def register_from_disk(self, path):
        return self.register_from_document(read_task_definition(path))

    def register_clone(self, cluster, service_name):
        try:
            response = self.ecs_client.describe_services(cluster=cluster, services=[service_name])
        except (botocore.exceptions.ClientError, botocore.exceptions.BotoCoreError) as error:
            logger.error("Unable to describe %s service %s"%(service_name, error))
            raise RegistrationError("Unable to describe %s service in %s cluster: %s"%(service_name, cluster, error)) from error
        svc = find_service(response.get("services",[]), service_name)
        if svc is None:
            raise ServiceNotFoundError(cluster, service_name)
        task_def_arn = svc.get("taskDefinition")
        logger.info("Cloning %s task definition of %s service"%(task_def_arn, service_name))
        try:
            response = self.ecs_client.describe_task_definition(
                taskDefinition=task_def_arn,
                include=['TAGS']
            )
        except (botocore.exceptions.ClientError, botocore.exceptions.BotoCoreError) as error:
            logger.error("Unable to describe %s task definition %s"%(task_def_arn, error))
            raise RegistrationError("Unable to describe %s task definition: %s"%(task_def_arn, error)) from error
        return self.register_from_document(response.get("taskDefinition",{}), response.get("tags"))
