import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

import aws_cdk as cdk

"""
Bucket configuration read from the process environment.
Values are resolved once per stack and never change afterwards.
"""

logger = logging.getLogger(__name__)

DEFAULT_NAME_PREFIX = "hereya"


def bucket_name_for(name_prefix: str, stack_name: str) -> str:
    return f"{name_prefix}-{stack_name}".lower()


@dataclass(frozen=True)
class BucketConfig:
    name_prefix: str = DEFAULT_NAME_PREFIX
    auto_delete_objects: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BucketConfig":
        """Build a config from ``namePrefix`` and ``autoDeleteObjects``.

        An empty or missing prefix falls back to ``hereya``. Auto-delete is
        only enabled by the exact string ``"true"``; anything else keeps the
        bucket on removal.
        """
        if environ is None:
            environ = os.environ

        config = cls(
            name_prefix=environ.get("namePrefix") or DEFAULT_NAME_PREFIX,
            auto_delete_objects=environ.get("autoDeleteObjects") == "true",
        )
        logger.debug(
            "Resolved bucket config: prefix=%s auto_delete_objects=%s",
            config.name_prefix,
            config.auto_delete_objects,
        )
        return config

    @property
    def removal_policy(self) -> cdk.RemovalPolicy:
        if self.auto_delete_objects:
            return cdk.RemovalPolicy.DESTROY
        return cdk.RemovalPolicy.RETAIN
