#!/usr/bin/env python3
"""Pages through DescribeInstances for one region."""

import time
from typing import Any, Callable, Dict, List

from aws_password_extractor.core.aws.ec2 import EC2Manager
from aws_password_extractor.core.constants import (
    DEFAULT_MAX_PAGES,
    DEFAULT_PAGE_SIZE,
    DEFAULT_TIMEOUT_SECONDS,
)
from aws_password_extractor.utils.exceptions import EnumerationLimitError
from aws_password_extractor.utils.logger import get_logger


class InstanceEnumerator:
    """Collects every instance in the region, in API order.

    Pages are requested one after another until the response carries no
    NextToken. The loop is bounded by ``max_pages`` and ``timeout_seconds``.
    """

    def __init__(
        self,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: int = DEFAULT_MAX_PAGES,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.page_size = page_size
        self.max_pages = max_pages
        self.timeout_seconds = timeout_seconds
        self.clock = clock
        self.logger = get_logger(__name__)

    def enumerate(self, ec2_manager: EC2Manager) -> List[Dict[str, Any]]:
        """Return all instances, flattened out of their reservations."""
        instances: List[Dict[str, Any]] = []
        started = self.clock()
        next_token = None
        pages = 0

        self.logger.debug(
            "Pulling back reservations", extra={"page_size": self.page_size}
        )

        while True:
            if pages >= self.max_pages:
                raise EnumerationLimitError(
                    f"DescribeInstances returned a continuation token after "
                    f"{pages} pages; giving up at the limit of {self.max_pages}"
                )
            elapsed = self.clock() - started
            if elapsed > self.timeout_seconds:
                raise EnumerationLimitError(
                    f"Instance enumeration exceeded {self.timeout_seconds}s "
                    f"after {pages} pages"
                )

            response = ec2_manager.describe_instances_page(self.page_size, next_token)
            pages += 1

            reservations = response.get("Reservations", [])
            for reservation in reservations:
                instances.extend(reservation.get("Instances", []))

            next_token = response.get("NextToken")
            self.logger.info(
                "Reservations returned",
                extra={"page": pages, "reservations": len(reservations), "more": bool(next_token)},
            )
            if not next_token:
                break

        self.logger.info(
            "Instance enumeration complete",
            extra={"pages": pages, "instances": len(instances)},
        )
        return instances
