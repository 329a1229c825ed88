"""
Title: Lift Scan Input/Output Snapshots
Author: Alex Cooke
Date Created: 2026-10-12
Last Modified: 2026-10-12
Version: 1.0

Purpose:
Defines the per-cycle data exchanged between the scan driver and the lift
controller: one InputSnapshot read by the controller and one OutputSnapshot
written for the actuator driver every scan cycle.

Targeted Requirements:
- LCS-FR005: Carries the actuator outputs selected for the active state.
- LCS-FR007: One input snapshot per scan cycle; the controller never reads
  live inputs mid-cycle.

Scope and Limitations:
- Snapshots are plain immutable records; values are stored as given and are
  not range checked here (the controller decides how to treat them).

Safety Notice:
This software is for academic and illustrative purposes only.
It must not be used to control real lifting equipment.

Dependencies:
- Python 3.10+
- dataclasses (standard library)

Related Documents:
- LCS Requirements Document
- LCS Scan Cycle and Interface Notes

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world lifting
or safety-critical systems.
"""

from dataclasses import dataclass

from lift_states import MotorDirection


@dataclass(frozen=True)
class InputSnapshot:
    command_up: bool = False
    command_down: bool = False
    command_hold: bool = False      # informational only
    emergency_stop: bool = False
    reset_fault_pulse: bool = False # true for one cycle per operator reset

    # Derived from plant position by the scan driver
    top_limit_switch: bool = False
    bottom_limit_switch: bool = False

    load_kg: float = 0.0


@dataclass(frozen=True)
class OutputSnapshot:
    motor_enable: bool = False
    motor_direction: MotorDirection = MotorDirection.NONE
    brake_engaged: bool = True
    fault_lamp: bool = False
