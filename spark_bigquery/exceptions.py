"""Exceptions raised while resolving the BigQuery data source options"""
from typing import List


class BigQueryConfigError(ValueError):
    """Base exception for all configuration errors"""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MissingRequiredKey(BigQueryConfigError):
    """A required option key is absent from the option map"""

    def __init__(self, key: str):
        super().__init__(
            f"Missing required configuration key '{key}'",
            details={"key": key},
        )
        self.key = key


class InvalidIntegerValue(BigQueryConfigError):
    """An option value could not be parsed as a base-10 long integer"""

    def __init__(self, key: str, value: str):
        super().__init__(
            f"Invalid value '{value}' for configuration key '{key}': expected a base-10 integer",
            details={"key": key, "value": value},
        )
        self.key = key
        self.value = value


class InvalidEnumValue(BigQueryConfigError):
    """An option value does not match any of the allowed labels"""

    def __init__(self, key: str, value: str, allowed_values: List[str]):
        super().__init__(
            f"Invalid value '{value}' for configuration key '{key}': "
            f"expected one of {', '.join(allowed_values)}",
            details={"key": key, "value": value, "allowed_values": allowed_values},
        )
        self.key = key
        self.value = value
        self.allowed_values = allowed_values


class InvalidConfigValue(BigQueryConfigError):
    """An option value was parsed but rejected by field validation"""

    def __init__(self, key: str, value, reason: str):
        super().__init__(
            f"Invalid value '{value}' for configuration key '{key}': {reason}",
            details={"key": key, "value": value, "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason
