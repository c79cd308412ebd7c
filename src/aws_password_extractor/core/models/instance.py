"""Instance Detail Model

Connection details for a single EC2 instance."""

import ipaddress
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from aws_password_extractor.core.constants import NAME_TAG_KEY
from aws_password_extractor.utils.exceptions import DataShapeError


def get_name_tag(instance: Dict[str, Any]) -> str:
    """Return the value of the instance's Name tag.

    Raises DataShapeError when the tag is absent; there is no fallback name.
    """
    for tag in instance.get("Tags") or []:
        if tag.get("Key") == NAME_TAG_KEY:
            return tag.get("Value", "")
    raise DataShapeError(
        f"Instance {instance.get('InstanceId', '<unknown>')} has no "
        f"'{NAME_TAG_KEY}' tag"
    )


def get_private_ip(instance: Dict[str, Any]) -> str:
    """Parse the instance's private address and return its textual form."""
    raw = instance.get("PrivateIpAddress")
    if not raw:
        raise DataShapeError(
            f"Instance {instance.get('InstanceId', '<unknown>')} has no private IP address"
        )
    try:
        return str(ipaddress.ip_address(raw))
    except ValueError as e:
        raise DataShapeError(
            f"Instance {instance.get('InstanceId', '<unknown>')} has an invalid "
            f"private IP address {raw!r}"
        ) from e


@dataclass(frozen=True)
class InstanceDetail:
    """Name, address and recovered password of one instance."""
    name: str
    ip_address: str
    password: Optional[str] = field(default=None, repr=False)

    @property
    def has_password(self) -> bool:
        return bool(self.password)

    def __str__(self) -> str:
        text = f"Instance Detail (Name = {self.name}, IPAddress = {self.ip_address}"
        if self.has_password:
            text += f", Password = {'*' * len(self.password)}"
        return text + ")"

    @classmethod
    def from_aws_instance(
        cls, instance: Dict[str, Any], password: Optional[str] = None
    ) -> "InstanceDetail":
        """Create InstanceDetail from AWS instance data."""
        return cls(
            name=get_name_tag(instance),
            ip_address=get_private_ip(instance),
            password=password,
        )
