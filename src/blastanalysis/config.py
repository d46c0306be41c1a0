"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents literal coordinates and sample curves from being
   scattered throughout the code.
2. Demonstration: It holds the reference P-I curves and load points used by
   the command-line demo, so the tests can exercise the same data.

Exports:
    ORIGIN_COORDINATES (tuple): Start of every load ray, (I, P) = (0, 0).
    LOGGER_NAME (str): Name of the package logger.
    DEFAULT_LOG_LEVEL (int): Level used when --debug is not given.
    DEMO_SEGMENTS (tuple): Segment endpoints A, B, C, D for the crossing demo.
    DEMO_CURVE_1, DEMO_CURVE_2 (tuple): Sample P-I curves as (I, P) pairs.
"""
import logging
from typing import Tuple

Coordinates = Tuple[float, float]

# Global Constants
ORIGIN_COORDINATES: Coordinates = (0.0, 0.0)
LOGGER_NAME: str = "blastanalysis"
DEFAULT_LOG_LEVEL: int = logging.INFO

# Demonstration data
DEMO_SEGMENTS: Tuple[Coordinates, Coordinates, Coordinates, Coordinates] = (
    (0.0, 0.0), (2.0, 2.0),  # A, B
    (0.0, 2.0), (2.0, 0.0),  # C, D
)
DEMO_CURVE_1: Tuple[Coordinates, ...] = ((1.0, 3.0), (2.0, 2.0), (3.0, 1.0))
DEMO_CURVE_2: Tuple[Coordinates, ...] = ((0.5, 4.0), (1.6, 3.0), (3.0, 2.0))

DEMO_SINGLE_LOAD: Coordinates = (2.0, 3.0)
DEMO_COLLECTION_LOAD: Coordinates = (2.0, 2.5)
DEMO_COUNT_LOAD: Coordinates = (2.0, 3.0)
