"""Glue helpers exposed for CLI and integration harnesses."""

from .io import (
    default_preferences,
    load_config,
    load_groups,
    load_preferences,
    validate_groups,
    validate_preferences,
)
from .pipeline import (
    assemble_data,
    build_arg_parser,
    build_params,
    load_and_run,
    main,
    run_pipeline,
)

__all__ = [
    "assemble_data",
    "build_arg_parser",
    "build_params",
    "default_preferences",
    "load_and_run",
    "load_config",
    "load_groups",
    "load_preferences",
    "main",
    "run_pipeline",
    "validate_groups",
    "validate_preferences",
]
