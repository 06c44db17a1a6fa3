"""
Type definitions used across layers
"""

from enum import StrEnum


class Side(StrEnum):
    """The four sides of a box. Values are used in requests / responses."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


class Orientation(StrEnum):
    """
    HORIZONTAL: separates an upper box from the box below it.
    VERTICAL: separates a left box from the box to its right.
    """

    HORIZONTAL = "h"
    VERTICAL = "v"


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    FINISHED = "finished"


# Players are identified by their name throughout the layers
PlayerName = str
