"""Configuration package."""
from .settings import Settings, get_settings, parse_gateway_weights

__all__ = ["Settings", "get_settings", "parse_gateway_weights"]
