"""AWS Password Extractor - recover initial EC2 administrator passwords."""

__version__ = "1.0.0"
