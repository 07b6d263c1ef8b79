# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0

# every error raised by ecsdeploy derives from EcsDeployError so callers
# (the CLI included) can stop on one type
class EcsDeployError(Exception):
    pass

class NotFoundError(EcsDeployError):
    def __init__(self, path):
        self.path = path
        super().__init__("Task definition file %s does not exist"%(path))

class ValidationError(EcsDeployError):
    pass

class ServiceNotFoundError(EcsDeployError):
    def __init__(self, cluster, service_name):
        self.cluster = cluster
        self.service_name = service_name
        super().__init__("Service %s not found in %s cluster"%(service_name, cluster))

class EncryptionError(EcsDeployError):
    pass

class DecryptionError(EcsDeployError):
    pass

# value is not a ${...} marker, KMS was never called
class DecryptFormatError(DecryptionError):
    pass

# value is a marker but KMS refused it
class DecryptBackendError(DecryptionError):
    pass

class RegistrationError(EcsDeployError):
    pass

class UpdateError(EcsDeployError):
    pass

# ECS refused a read of service or task state while monitoring
class StatusError(EcsDeployError):
    pass

class NoTasksRunningError(EcsDeployError):
    def __init__(self, cluster, service_name):
        self.cluster = cluster
        self.service_name = service_name
        super().__init__("No running tasks found for %s service in %s cluster"%(service_name, cluster))

class ZeroDesiredCountError(EcsDeployError):
    def __init__(self, cluster, service_name):
        self.cluster = cluster
        self.service_name = service_name
        super().__init__("Desired count of %s service in %s cluster is 0"%(service_name, cluster))

class DeployTimeoutError(EcsDeployError):
    def __init__(self, timeout, task_status_logs):
        self.timeout = timeout
        self.task_status_logs = list(task_status_logs)
        message = "Service is not stable after %s seconds"%(timeout)
        if len(self.task_status_logs) > 0:
            message = message + "\n" + "\n".join(self.task_status_logs)
        super().__init__(message)
