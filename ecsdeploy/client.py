# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
from .utils import get_client
from .deploy.secret_codec import SecretCodec
from .deploy.env_resolver import EnvironmentResolver
from .deploy.task_registrar import TaskRegistrar
from .deploy.service_updater import ServiceUpdater
from .deploy.deploy_monitor import DeploymentMonitor, DEFAULT_TIMEOUT, DEFAULT_POLLING_INTERVAL

class DeployClient:
    """Entry points used by the CLI, wired to boto3 ECS and KMS clients.

    Pass ecs_client/kms_client to reuse existing clients, otherwise they are
    created for region_name (or the default region when empty).
    """

    def __init__(self, region_name="", timeout=DEFAULT_TIMEOUT, polling_interval=DEFAULT_POLLING_INTERVAL,
                 ecs_client=None, kms_client=None):
        self.ecs_client = ecs_client if ecs_client is not None else get_client("ecs", region_name)
        self.kms_client = kms_client if kms_client is not None else get_client("kms", region_name)
        self.codec = SecretCodec(self.kms_client)
        self.resolver = EnvironmentResolver(self.codec)
        self.registrar = TaskRegistrar(self.ecs_client, self.resolver)
        self.monitor = DeploymentMonitor(self.ecs_client, timeout=timeout, polling_interval=polling_interval)
        self.updater = ServiceUpdater(self.ecs_client, self.registrar, self.monitor)

    def register_task(self, path):
        return self.registrar.register_from_disk(path)

    def register_clone_task(self, cluster, service_name):
        return self.registrar.register_clone(cluster, service_name)

    def update_service(self, cluster, service_name, wait=True):
        return self.updater.update(cluster, service_name, wait)

    def encrypt(self, key_id, plaintext):
        return self.codec.encrypt(key_id, plaintext)

    def decrypt(self, marker):
        return self.codec.decrypt(marker)
