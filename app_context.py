"""
Title: Application Context Container for LCS
Author: Alex Cooke
Date Created: 2026-10-13
Last Modified: 2026-10-13
Version: 1.0

Purpose:
Defines a central application context object for the Lift Control System
(LCS) simulation. The AppContext aggregates the controller, plant model,
operator panel, scan loop, shared configuration and lifecycle control
primitives into a single, explicit container to simplify wiring and
controlled shutdown across the application.

Targeted Requirements:
- None (supporting analysis, integration, and tooling only)

Scope and Limitations:
- Intended for simulation and console-driven execution only.
- Acts purely as a dependency container; contains no control or safety logic.

Safety Notice:
This software is for academic and illustrative purposes only.
It must not be used to control real lifting equipment.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- threading (standard library)
- typing (standard library)

Related Documents:
- LCS Requirements Document
- LCS System Architecture and Integration Notes

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world lifting
or safety-critical systems.
"""

from dataclasses import dataclass
from threading import Event
from typing import Callable

from fault_recorder import FaultRecorder
from lift_configuration import LiftConfiguration
from lift_controller import LiftController
from scan_loop import OperatorPanel, ScanLoop
from sims.plant_model import PlantModel


@dataclass
class AppContext:
    controller: LiftController
    plant: PlantModel
    panel: OperatorPanel
    loop: ScanLoop
    config: LiftConfiguration
    clock: Callable[[], float]
    shutdown_event: Event
    fault_recorder: FaultRecorder | None = None

    def shutdown(self) -> None:
        self.shutdown_event.set()
