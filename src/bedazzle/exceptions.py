"""
Custom exceptions for bedazzle
"""


class BedazzleError(Exception):
    """Base exception for all bedazzle errors"""
    pass


class ConfigError(BedazzleError):
    """Configuration file could not be read or failed validation"""
    pass
