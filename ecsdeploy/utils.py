# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
import boto3
from botocore.config import Config
from pick import pick
import logging

logger = logging.getLogger(__name__)

def get_client(service_name, region_name=""):
    if len(region_name) > 0:
        return boto3.client(service_name, config=Config(region_name = region_name))
    return boto3.client(service_name)

def pick_ecs_cluster(client):
    cluster_list = []
    paginator = client.get_paginator('list_clusters')
    response_iterator = paginator.paginate(
        PaginationConfig={
            'MaxItems': 5000,
            'PageSize': 100,
        }
    )
    for i in response_iterator:
        cluster_list = cluster_list+i["clusterArns"]
    if len(cluster_list)<=0:
        return None
    option, _ = pick(cluster_list, title="Pick the ECS cluster to use",
                     default_index=0)
    logger.info("Selected ECS cluster is %s"%(option))
    return(option.split("cluster/")[1])
