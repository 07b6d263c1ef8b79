# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
import copy
from .ecs_objects import validate_task_definition
from .secret_codec import is_marker
import logging

logger = logging.getLogger(__name__)

class EnvironmentResolver:
    """Decrypts ${...} environment values of every container in a task definition.

    resolve() works on a deep copy, the document handed in is left untouched.
    Values that are not markers keep their type and position.
    """

    def __init__(self, codec):
        self.codec = codec

    def resolve(self, task_def):
        validate_task_definition(task_def)
        resolved = copy.deepcopy(task_def)
        for cd in resolved["containerDefinitions"]:
            environment = cd.get("environment")
            if environment is None: continue
            for item in environment:
                value = item.get("value")
                if not is_marker(value):
                    continue
                logger.debug("Decrypting %s variable of %s container"%(item.get("name"), cd.get("name")))
                item["value"] = self.codec.decrypt(value)
        return resolved
