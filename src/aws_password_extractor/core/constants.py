#!/usr/bin/env python3
"""Core constants for password extraction."""

# Instance Constants
NAME_TAG_KEY = "Name"

# AWS Service Constants
DEFAULT_PAGE_SIZE = 10
DEFAULT_MAX_PAGES = 1000
DEFAULT_TIMEOUT_SECONDS = 300
DEFAULT_CONNECT_TIMEOUT = 10
DEFAULT_READ_TIMEOUT = 30
EC2_SERVICE = "ec2"
STS_SERVICE = "sts"

# Report Format Constants
REPORT_ENCODING = "utf-8"
MIN_INDEX_WIDTH = 3

# Configuration Constants
CONFIG_ENV_VAR = "AWS_PASSWORD_EXTRACTOR_CONFIG"
DEFAULT_VERBOSITY = "Warn"
VERBOSITY_CHOICES = ["Off", "Debug", "Info", "Warn", "Error", "Fatal"]
