#!/usr/bin/env python3
"""Simple Text Report Generator."""

from typing import List

from aws_password_extractor.core.constants import MIN_INDEX_WIDTH
from aws_password_extractor.core.models.instance import InstanceDetail


class TextReportGenerator:
    """Renders instance connection details as plain text."""

    def __init__(self, min_index_width: int = MIN_INDEX_WIDTH):
        self.min_index_width = min_index_width

    def index_width(self, total: int) -> int:
        """Digits needed for the largest index, never fewer than the minimum."""
        return max(len(str(total)), self.min_index_width)

    def render(self, details: List[InstanceDetail]) -> str:
        """Render the report; identical input always gives identical text."""
        total = len(details)
        width = self.index_width(total)

        lines = [f"Connection details for {total} instance(s) in total.", ""]
        for index, detail in enumerate(details, start=1):
            lines.append(f"{index:0{width}d}.\tName: {detail.name}")
            lines.append(f"\tIPAddress: {detail.ip_address}")
            if detail.has_password:
                lines.append(f"\tPassword: {detail.password}")
            lines.append("")

        return "\n".join(lines) + "\n"
