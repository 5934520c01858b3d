import logging
import os

import aws_cdk as cdk
from stacks.s3_bucket_stack import HereyaAwsS3BucketStack

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Account and region come from the CDK CLI profile when not set explicitly
aws_environment = cdk.Environment(
    account=os.getenv("CDK_DEFAULT_ACCOUNT"), region=os.getenv("CDK_DEFAULT_REGION")
)
stack_name = os.environ.get("STACK_NAME", "HereyaAwsS3BucketStack")

# Instantiate the CDK app; the CLI passes the assembly directory in CDK_OUTDIR
app = cdk.App(outdir=os.environ.get("CDK_OUTDIR"))

# Bucket settings (namePrefix, autoDeleteObjects) are read from the environment
HereyaAwsS3BucketStack(app, stack_name, env=aws_environment)

# Tag all resources in CloudFormation
cdk.Tags.of(app).add("aws-cdk-managed", "True")
cdk.Tags.of(app).add("Project", "hereya-aws-s3bucket")

# Synthesize the CDK app
app.synth()
