# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
import time
import botocore.exceptions
from .ecs_objects import ServiceState, RolloutProgress, DESCRIBE_TASKS_BATCH_SIZE
from .task_registrar import find_service
from ..exceptions import ServiceNotFoundError, NoTasksRunningError, ZeroDesiredCountError, DeployTimeoutError, StatusError
import logging

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 600
DEFAULT_POLLING_INTERVAL = 20

class DeploymentMonitor:
    """Polls ECS until the tasks of a service run the new task definition.

    Every poll reads a fresh snapshot of the service and its tasks. Nothing is
    written to ECS, so abandoning wait_for_deploy leaves no state behind.
    clock and sleep are injectable to drive the loop without real delays.
    """

    def __init__(self, ecs_client, timeout=DEFAULT_TIMEOUT, polling_interval=DEFAULT_POLLING_INTERVAL,
                 clock=time.monotonic, sleep=time.sleep):
        self.ecs_client = ecs_client
        self.timeout = timeout
        self.polling_interval = polling_interval
        self.clock = clock
        self.sleep = sleep

    def service_status(self, cluster, service_name):
        try:
            response = self.ecs_client.describe_services(cluster=cluster, services=[service_name])
        except (botocore.exceptions.ClientError, botocore.exceptions.BotoCoreError) as error:
            logger.error("Unable to describe %s service %s"%(service_name, error))
            raise StatusError("Unable to describe %s service in %s cluster: %s"%(service_name, cluster, error)) from error
        svc = find_service(response.get("services",[]), service_name)
        if svc is None:
            raise ServiceNotFoundError(cluster, service_name)
        return ServiceState(
            service_name=svc.get("serviceName"),
            service_arn=svc.get("serviceArn"),
            desired_count=svc.get("desiredCount",0),
            running_count=svc.get("runningCount",0),
            task_definition=svc.get("taskDefinition"))

    def list_running_tasks(self, cluster, service_name):
        task_arns = []
        paginator = self.ecs_client.get_paginator('list_tasks')
        try:
            response_iterator = paginator.paginate(
                cluster=cluster,
                serviceName=service_name,
                desiredStatus="RUNNING"
            )
            for i in response_iterator:
                task_arns += i.get("taskArns",[])
        except (botocore.exceptions.ClientError, botocore.exceptions.BotoCoreError) as error:
            logger.error("Unable to list tasks of %s service %s"%(service_name, error))
            raise StatusError("Unable to list tasks of %s service in %s cluster: %s"%(service_name, cluster, error)) from error
        return task_arns

    def describe_tasks(self, cluster, task_arns):
        tasks = []
        for start in range(0, len(task_arns), DESCRIBE_TASKS_BATCH_SIZE):
            try:
                response = self.ecs_client.describe_tasks(
                    cluster=cluster,
                    tasks=task_arns[start:start+DESCRIBE_TASKS_BATCH_SIZE]
                )
            except (botocore.exceptions.ClientError, botocore.exceptions.BotoCoreError) as error:
                logger.error("Unable to describe tasks in %s cluster %s"%(cluster, error))
                raise StatusError("Unable to describe tasks in %s cluster: %s"%(cluster, error)) from error
            tasks += response.get("tasks",[])
        return tasks

    def deployment_progress(self, cluster, service_name, identity):
        task_arns = self.list_running_tasks(cluster, service_name)
        if len(task_arns) <= 0:
            raise NoTasksRunningError(cluster, service_name)
        new_running_count = 0
        task_status_logs = []
        tasks = self.describe_tasks(cluster, task_arns)
        for task in tasks:
            if task.get("taskDefinitionArn") == identity.task_definition_arn:
                new_running_count += 1
            task_status_logs.append("%s [%s]"%(task.get("taskArn",""), task.get("lastStatus","")))
        return RolloutProgress(
            current_running_count=len(tasks),
            new_running_count=new_running_count,
            task_status_logs=task_status_logs)

    def wait_for_deploy(self, cluster, service_name, identity):
        if self.service_status(cluster, service_name).desired_count <= 0:
            raise ZeroDesiredCountError(cluster, service_name)

        started = self.clock()
        while True:
            self.sleep(self.polling_interval)
            # desired count may change mid rollout, read it on every poll
            desired_count = self.service_status(cluster, service_name).desired_count
            if desired_count <= 0:
                raise ZeroDesiredCountError(cluster, service_name)
            progress = self.deployment_progress(cluster, service_name, identity)
            task_status_logs = progress.task_status_logs
            elapsed = self.clock() - started
            logger.info("Deploying... [%d/%d] (%d seconds elapsed)"%(progress.new_running_count, desired_count, elapsed))
            for line in task_status_logs:
                logger.debug("  %s"%(line))
            if progress.new_running_count == desired_count:
                logger.info("Service %s is running %s"%(service_name, identity.task_definition_arn))
                return
            if elapsed > self.timeout:
                raise DeployTimeoutError(self.timeout, task_status_logs)
