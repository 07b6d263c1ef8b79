# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
import sys
import click
import botocore.exceptions

from .client import DeployClient
from .exceptions import EcsDeployError
from .utils import pick_ecs_cluster

import logging
import logging.config
LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
        },
    },
    'handlers': {
        'default': {
            'level': 'INFO',
            'formatter': 'standard',
            'class': 'logging.StreamHandler',
            'stream': 'ext://sys.stdout',  # Default is stderr
        },
    },
    'loggers': {
        '': {  # root logger
            'handlers': ['default'],
            'level': 'WARNING',
            'propagate': False
        }
    }
}
logging.config.dictConfig(LOGGING_CONFIG)
logger = logging.getLogger()

def resolve_cluster(client, cluster):
    if len(cluster) > 0:
        return cluster
    cluster = pick_ecs_cluster(client.ecs_client)
    if cluster is None:
        logger.critical("No ECS clusters found. Check AWS_REGION setting or pass --ecs_region_name")
        sys.exit(1)
    return cluster

def register_cli_handler(client, source):
    if len(source) <= 0:
        logger.critical("--source is required to register a task definition")
        sys.exit(1)
    identity = client.register_task(source)
    logger.log(100, "Registered task definition %s"%(identity.task_definition_arn))

def clone_cli_handler(client, cluster, service):
    identity = client.register_clone_task(resolve_cluster(client, cluster), service)
    logger.log(100, "Registered task definition %s"%(identity.task_definition_arn))

def update_cli_handler(client, cluster, service, wait):
    service_arn = client.update_service(resolve_cluster(client, cluster), service, wait)
    logger.log(100, "Updated service %s"%(service_arn))

def encrypt_cli_handler(client, master_key, value):
    if len(master_key) <= 0:
        logger.critical("--master_key is required to encrypt a value")
        sys.exit(1)
    click.echo(client.encrypt(master_key, value))

def decrypt_cli_handler(client, value):
    click.echo(client.decrypt(value))


# Click cli entry point function
@click.command()
@click.option("-m","--mode", default="update", type=click.Choice(["register","clone","update","encrypt","decrypt"], case_sensitive=False), help="register - task definition from file, clone - re-register the task definition of a service, update - clone and deploy to a service, encrypt/decrypt - KMS ${...} values")
@click.option("-s", "--source", default="", type=str, help="Path to YAML or JSON task definition file")
@click.option("-c", "--ecs_cluster_name", default="", type=str, help="ECS cluster of the service, picked interactively when empty")
@click.option("--service", default="", type=str, help="ECS service name")
@click.option("--wait/--no-wait", default=True, help="Wait until the new task definition is rolled out")
@click.option("--timeout", default=600, type=int, help="Seconds to wait for the rollout")
@click.option("--polling_interval", default=20, type=int, help="Seconds between rollout status checks")
@click.option("-k", "--master_key", default="", type=str, help="KMS key id or alias used to encrypt")
@click.option("-v", "--value", default="", type=str, help="Value to encrypt or ${...} value to decrypt")
@click.option("--ecs_region_name", default="", type=str, help="Region name for ECS and KMS")
@click.option("-l", "--log_level", default="WARNING", type=click.Choice(["DEBUG","INFO","WARNING","ERROR","CRITICAL"], case_sensitive=False), help="Select log level")
def deploy(mode, source, ecs_cluster_name, service, wait, timeout, polling_interval, master_key, value, ecs_region_name, log_level):
    logger.setLevel(getattr(logging,log_level.upper()))
    for handler in logger.handlers:
        handler.setLevel(getattr(logging,log_level.upper()))
    mode = mode.lower()
    if mode in ("clone", "update") and len(service) <= 0:
        logger.critical("--service is required in %s mode"%(mode))
        sys.exit(1)
    client = DeployClient(region_name=ecs_region_name, timeout=timeout, polling_interval=polling_interval)
    try:
        if mode == "register":
            register_cli_handler(client, source)
            return
        if mode == "clone":
            clone_cli_handler(client, ecs_cluster_name, service)
            return
        if mode == "update":
            update_cli_handler(client, ecs_cluster_name, service, wait)
            return
        if mode == "encrypt":
            encrypt_cli_handler(client, master_key, value)
            return
        if mode == "decrypt":
            decrypt_cli_handler(client, value)
            return
    except (EcsDeployError, botocore.exceptions.ClientError, botocore.exceptions.BotoCoreError) as error:
        logger.critical("%s"%(error))
        sys.exit(1)
