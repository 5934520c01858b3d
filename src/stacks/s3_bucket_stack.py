import logging
from typing import Optional

import aws_cdk as cdk
from constructs import Construct

from custom_constructs.bucket_config import BucketConfig
from custom_constructs.iam_construct import IamConstruct
from custom_constructs.storage_construct import StorageConstruct

logger = logging.getLogger(__name__)


class HereyaAwsS3BucketStack(cdk.Stack):
    def __init__(
        self,
        scope: Construct,
        id: str,
        config: Optional[BucketConfig] = None,
        **kwargs,
    ) -> None:
        super().__init__(scope, id, **kwargs)

        # Read the environment once so every construct sees the same values
        self.config = config if config is not None else BucketConfig.from_env()

        # Storage resources (S3 bucket)
        storage = StorageConstruct(self, "StorageConstruct", config=self.config)
        self.bucket = storage.bucket
        self.bucket_name = storage.bucket_name
        logger.info(
            "Declaring %s with bucket %s (%s)",
            self.stack_name,
            self.bucket_name,
            self.config,
        )

        # IAM policy document for the bucket's objects
        iam = IamConstruct(
            self, "IamConstruct", bucket=storage.bucket, config=self.config
        )
        self.policy_document = iam.policy_document

        # Outputs
        cdk.CfnOutput(
            self,
            "bucketName",
            value=storage.bucket.bucket_name,
            description="The name of the S3 bucket",
        )

        cdk.CfnOutput(
            self,
            "awsRegion",
            value=self.region,
            description="The AWS region",
        )

        cdk.CfnOutput(
            self,
            "iamPolicyAwsS3Bucket",
            value=iam.policy_json,
            description="IAM policy document for S3 bucket permissions",
        )

        cdk.CfnOutput(
            self,
            "useAwsVpcEndpointS3",
            value="true",
            description="Use AWS VPC endpoint for S3",
        )
