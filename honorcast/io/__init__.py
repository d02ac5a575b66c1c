"""
File I/O for HONORCAST.

This module handles reading and writing of plan files (configuration
plus day entries) in JSON or YAML.
"""

from honorcast.io.plan_io import (
    CURRENT_SCHEMA_VERSION,
    PlanFile,
    PlanLoadError,
    PlanSaveError,
    export_filename,
    load_plan,
    migrate,
    save_plan,
)

__all__ = [
    "CURRENT_SCHEMA_VERSION",
    "PlanFile",
    "PlanLoadError",
    "PlanSaveError",
    "export_filename",
    "load_plan",
    "migrate",
    "save_plan",
]
