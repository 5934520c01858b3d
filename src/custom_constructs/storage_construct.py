import logging
from typing import Optional

from aws_cdk import aws_s3 as s3
from constructs import Construct
from .base_construct import BaseConstruct
from .bucket_config import BucketConfig, bucket_name_for

"""
Storage Construct that provisions the stack's S3 bucket.
Security settings are fixed; only the name prefix and removal behaviour
come from configuration.
"""

logger = logging.getLogger(__name__)

BUCKET_LOGICAL_ID = "HereyaS3BucketDD8180CF"


class StorageConstruct(BaseConstruct):
    def __init__(
        self, scope: Construct, id: str, config: Optional[BucketConfig] = None
    ) -> None:
        super().__init__(scope, id, config=config)

        self._bucket_name = bucket_name_for(self.config.name_prefix, self.stack_name)

        # Auto-delete requires DESTROY, so both follow the same flag
        self._bucket = s3.Bucket(
            self,
            "HereyaS3Bucket",
            bucket_name=self._bucket_name,
            versioned=True,
            block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
            encryption=s3.BucketEncryption.S3_MANAGED,
            removal_policy=self.config.removal_policy,
            auto_delete_objects=self.config.auto_delete_objects,
        )
        # Keep the logical id of stacks deployed before the bucket moved into
        # this construct, otherwise CloudFormation replaces the named bucket
        self._bucket.node.default_child.override_logical_id(BUCKET_LOGICAL_ID)
        self.add_tags(self._bucket)

        logger.info(
            "Declared bucket %s (removal policy %s)",
            self._bucket_name,
            self.config.removal_policy.name,
        )

    @property
    def bucket(self) -> s3.IBucket:
        return self._bucket

    @property
    def bucket_name(self) -> str:
        return self._bucket_name
