#!/usr/bin/env python3
import os
from pathlib import Path

import aws_cdk as cdk

from cdk_products.cdk_products_stack import CdkProductsStack
from cdk_products.helpers import get_region, get_region_abbrev

# Load environment variables from .env file if it exists
env_file = Path(__file__).parent / ".env"
if env_file.exists():
    with open(env_file) as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                key, value = line.split("=", 1)
                # Only set if not already in environment (allow override)
                if key.strip() and not os.getenv(key.strip()):
                    os.environ[key.strip()] = value.strip()

app = cdk.App()

# Get environment from context or environment variable (dev/prod)
env_name = app.node.try_get_context("environment") or os.getenv("ENVIRONMENT", "dev")

# Get region and its abbreviation for stack naming
region = get_region()
region_abbrev = get_region_abbrev(region)

# Account is optional: the stack does no context lookups
account = os.getenv("AWS_ACCOUNT_ID") or os.getenv("CDK_DEFAULT_ACCOUNT")

# Configure environment
env = cdk.Environment(
    account=account,
    region=region,
)

# Environment-specific stack name with region: cdk-products-{region}-{env}
stack_name = f"cdk-products-{region_abbrev}-{env_name}"

stack = CdkProductsStack(
    app,
    f"CdkProductsStack-{region_abbrev}-{env_name}",
    stack_name=stack_name,
    env_name=env_name,
    env=env,
    description=f"CDK Products - AppSync, Cognito, Lambda and DynamoDB ({region_abbrev}-{env_name})",
)

app.synth()
