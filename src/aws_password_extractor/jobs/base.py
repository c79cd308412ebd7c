"""Base job class for extraction runs."""

from abc import ABC, abstractmethod
from typing import Any, Optional
import uuid

from aws_password_extractor.utils.config import ConfigManager
from aws_password_extractor.utils.logger import get_logger


class BaseJob(ABC):
    """Base class for all extractor jobs."""

    def __init__(self, config_manager: Optional[ConfigManager] = None, job_name: str = None):
        """Initialize the job with configuration."""
        self.config_manager = config_manager or ConfigManager()
        self.job_name = job_name or self.__class__.__name__.lower().replace('job', '')
        self.correlation_id = str(uuid.uuid4())[:8]  # Short correlation ID for tracking
        self.logger = get_logger(self.__class__.__module__)

    def log_extra(self, **fields: Any) -> dict:
        """Structured fields for a log call, tagged with this job's correlation ID."""
        return {"correlation_id": self.correlation_id, "operation": self.job_name, **fields}

    @abstractmethod
    def execute(self, **kwargs) -> Any:
        """Execute the job with given parameters."""
        pass
