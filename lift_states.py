"""
Title: Lift State Definitions (LCS LiftState / MotorDirection Enums)
Author: Alex Cooke
Date Created: 2026-10-12
Last Modified: 2026-10-12
Version: 1.0

Purpose:
Defines the authoritative set of operating states used by the Lift Control
System (LCS) scan controller, together with the motor direction indication
written to the actuator outputs every scan cycle.

Targeted Requirements:
- LCS-FR001: Provides FAULTED, reachable from every state, to inhibit all motion.
- LCS-FR005: Exactly one LiftState is active per scan cycle.
- LCS-FR006: MotorDirection follows the +1 / 0 / -1 drive convention.

Scope and Limitations:
- Logical states only; no position, velocity or fault cause is encoded.
- No hierarchy or substates are modeled.

Safety Notice:
This software is for academic and illustrative purposes only.
It must not be used to control real lifting equipment.

Dependencies:
- Python 3.10+
- enum (standard library)

Related Documents:
- LCS Requirements Document
- LCS System Architecture Description

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world lifting
or safety-critical systems.
"""

from enum import Enum, auto

class LiftState(Enum):
    HOLDING = auto()
    LIFTING = auto()
    LOWERING = auto()
    FAULTED = auto()


class MotorDirection(Enum):
    NONE = 0
    UP = 1
    DOWN = -1
