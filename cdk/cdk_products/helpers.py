"""
Naming and CDK context helpers shared by the stack modules.

Physical names follow ``{name}-{region abbrev}-{env}``, for example
``cdk-products-ue1-dev``, so several environments can share an account.
"""

import os
from collections.abc import Callable
from typing import Any, Optional

from aws_cdk import RemovalPolicy
from constructs import Construct

DEFAULT_REGION = "us-east-1"

REGION_ABBREVIATIONS: dict[str, str] = {
    "us-east-1": "ue1",
    "us-east-2": "ue2",
    "us-west-1": "uw1",
    "us-west-2": "uw2",
    "ca-central-1": "cc1",
    "sa-east-1": "se1",
    "eu-west-1": "ew1",
    "eu-west-2": "ew2",
    "eu-west-3": "ew3",
    "eu-central-1": "ec1",
    "eu-north-1": "en1",
    "ap-south-1": "as1",
    "ap-northeast-1": "ane1",
    "ap-northeast-2": "ane2",
    "ap-northeast-3": "ane3",
    "ap-southeast-1": "ase1",
    "ap-southeast-2": "ase2",
}


def get_region() -> str:
    """Deployment region: AWS_REGION, then CDK_DEFAULT_REGION, then us-east-1."""
    for var in ("AWS_REGION", "CDK_DEFAULT_REGION"):
        region = os.getenv(var)
        if region:
            return region
    return DEFAULT_REGION


def get_region_abbrev(region: Optional[str] = None) -> str:
    """Short region code used in resource names.

    Regions missing from REGION_ABBREVIATIONS fall back to their first three
    characters.
    """
    region = region or get_region()
    if region in REGION_ABBREVIATIONS:
        return REGION_ABBREVIATIONS[region]
    return region[:3]


def make_resource_namer(region_abbrev: str, env_name: str) -> Callable[..., str]:
    """Return ``rn(name)`` which appends the region and environment suffix.

    Args:
        region_abbrev: e.g. 'ue1'
        env_name: e.g. 'dev' or 'prod'
    """

    def rn(name: str, abbrev: str = region_abbrev, env: str = env_name) -> str:
        return "-".join((name, abbrev, env))

    return rn


def get_context_bool(scope: Construct, key: str, default: bool = False) -> bool:
    """Read a boolean flag from CDK context.

    Booleans are returned as-is. Strings are true unless they equal "false"
    (case insensitive), so ``-c retain_resources=true`` works from the CLI.

    Args:
        scope: Any construct (context is looked up through its node)
        key: Context key
        default: Value used when the key is not set

    Returns:
        The parsed flag
    """
    value: Any = scope.node.try_get_context(key)
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).lower() != "false"


def get_removal_policy(scope: Construct) -> RemovalPolicy:
    """Removal policy for stateful resources (user pool, table).

    Everything is destroyed with the stack unless ``retain_resources`` is set.
    """
    if get_context_bool(scope, "retain_resources"):
        return RemovalPolicy.RETAIN
    return RemovalPolicy.DESTROY
