# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
import copy
from collections import namedtuple
from ..exceptions import ValidationError

DeploymentIdentity = namedtuple("DeploymentIdentity", ["family", "revision", "task_definition_arn"])

ServiceState = namedtuple("ServiceState", ["service_name", "service_arn", "desired_count", "running_count", "task_definition"])

RolloutProgress = namedtuple("RolloutProgress", ["current_running_count", "new_running_count", "task_status_logs"])

# describe_task_definition returns these but register_task_definition rejects them
TASK_DEF_READONLY_FIELDS = [
    "taskDefinitionArn",
    "revision",
    "status",
    "requiresAttributes",
    "compatibilities",
    "registeredAt",
    "registeredBy",
    "deregisteredAt"
]

# describe_tasks accepts at most 100 task arns per call
DESCRIBE_TASKS_BATCH_SIZE = 100

def validate_task_definition(task_def):
    if not isinstance(task_def, dict):
        raise ValidationError("Task definition must be a mapping, got %s"%(type(task_def).__name__))
    container_definitions = task_def.get("containerDefinitions")
    if container_definitions is None:
        raise ValidationError("Task definition has no containerDefinitions")
    if not isinstance(container_definitions, list) or len(container_definitions) <= 0:
        raise ValidationError("containerDefinitions of %s task definition must be a non empty list"%(task_def.get("family","")))
    for cd in container_definitions:
        if not isinstance(cd, dict):
            raise ValidationError("Container definition in %s task definition must be a mapping"%(task_def.get("family","")))
        environment = cd.get("environment")
        if environment is not None and not isinstance(environment, list):
            raise ValidationError("environment of %s container must be a list"%(cd.get("name","")))
        for item in environment or []:
            if not isinstance(item, dict):
                raise ValidationError("environment entry %r of %s container must be a mapping"%(item, cd.get("name","")))
    return task_def

# returns a copy of the task definition that can be passed to register_task_definition
def registrable_task_def(task_def, tags=None):
    data = copy.deepcopy(task_def)
    for field in TASK_DEF_READONLY_FIELDS:
        if field in data:
            del data[field]
    if tags is not None and len(tags) > 0 and "tags" not in data:
        data["tags"] = copy.deepcopy(tags)
    return data
