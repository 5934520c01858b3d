from typing import Optional

import aws_cdk as cdk
from constructs import Construct

from .bucket_config import BucketConfig


class BaseConstruct(Construct):
    def __init__(
        self, scope: Construct, id: str, config: Optional[BucketConfig] = None, **kwargs
    ) -> None:
        super().__init__(scope, id, **kwargs)

        # Fall back to the process environment when no config is passed in
        self.config = config if config is not None else BucketConfig.from_env()
        self.stack_name = cdk.Stack.of(self).stack_name

        # Add common tags all resources should have
        self.tags = {
            "ManagedBy": "AWS-CDK-2",
            "Project": "hereya-aws-s3bucket",
        }

    def add_tags(self, resource: Construct) -> None:
        """Add standard tags to AWS resources"""
        for key, value in self.tags.items():
            cdk.Tags.of(resource).add(key, value)
