"""Utility modules for bridgeswap."""

from bridgeswap.utils.polling import with_interval

__all__ = ["with_interval"]
