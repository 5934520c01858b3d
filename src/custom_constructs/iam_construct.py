# src/custom_constructs/iam_construct.py
from typing import Optional

from aws_cdk import aws_iam as iam
from aws_cdk import aws_s3 as s3
import aws_cdk as cdk
from constructs import Construct
from .base_construct import BaseConstruct
from .bucket_config import BucketConfig

OBJECT_ACTIONS = ["s3:GetObject", "s3:PutObject", "s3:DeleteObject"]


class IamConstruct(BaseConstruct):
    def __init__(
        self,
        scope: Construct,
        id: str,
        bucket: s3.IBucket,
        config: Optional[BucketConfig] = None,
    ):
        super().__init__(scope, id, config=config)

        # Object-level access to every key in the bucket, handed to consumers
        # as an output rather than attached to a role here
        self._policy_document = iam.PolicyDocument(
            statements=[
                iam.PolicyStatement(
                    effect=iam.Effect.ALLOW,
                    actions=OBJECT_ACTIONS,
                    resources=[f"{bucket.bucket_arn}/*"],
                )
            ]
        )

    @property
    def policy_document(self) -> iam.PolicyDocument:
        return self._policy_document

    @property
    def policy_json(self) -> str:
        """Compact JSON text of the policy document.

        The bucket ARN is still a token at this point, so the returned string
        resolves to an ``Fn::Join`` when used in the template.
        """
        return cdk.Stack.of(self).to_json_string(self._policy_document.to_json())
