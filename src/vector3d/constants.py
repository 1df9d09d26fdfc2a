"""Shared constants for the Vector3D value type and its command-line interface."""

import os
from enum import StrEnum

SKIP_VALIDATION = os.getenv("SKIP_VALIDATION", "0") == "1"

DISPLAY_FORMAT = "%.2f"


class Operation(StrEnum):
    SHOW = "show"
    MAGNITUDE = "magnitude"
    NORMALIZE = "normalize"
    ADD = "add"
    MULTIPLY = "multiply"
    DOT = "dot"
    ANGLE = "angle"
