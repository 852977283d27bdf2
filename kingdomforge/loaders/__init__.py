"""Loaders for JSON setup configs and setup documents."""

from .json_loader import (
    error_from_dict,
    error_to_dict,
    load_setup_config,
    parse_setup_config,
    setup_config_to_dict,
    setup_from_dict,
    setup_to_dict,
    validate_setup_config_dict,
)

__all__ = [
    "error_from_dict",
    "error_to_dict",
    "load_setup_config",
    "parse_setup_config",
    "setup_config_to_dict",
    "setup_from_dict",
    "setup_to_dict",
    "validate_setup_config_dict",
]
