"""
Title: Lift Fault Codes and Priority Fault Latch
Author: Alex Cooke
Date Created: 2026-10-12
Last Modified: 2026-10-13
Version: 1.1

Purpose:
Defines the ranked fault taxonomy of the Lift Control System (LCS) and the
fault latch that holds the most severe fault seen since the last clear. The
latched fault is the only error-reporting path of the controller: faults are
surfaced through the latch and the fault lamp output, never raised.

Targeted Requirements:
- LCS-FR001: Emergency stop is the most severe latched fault.
- LCS-FR002: Overload is latched above limit violations and below emergency stop.
- LCS-FR004: A latched fault is held until explicitly cleared; it can only be
  raised to a more severe fault.

Scope and Limitations:
- One fault is held at a time; lower severity faults raised while a more
  severe fault is latched are not queued or remembered.

Safety Notice:
This software is for academic and illustrative purposes only.
It must not be used to control real lifting equipment.

Dependencies:
- Python 3.10+
- enum (standard library)

Related Documents:
- LCS Requirements Document
- LCS Fault Handling and Diagnostics Notes

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world lifting
or safety-critical systems.
"""

from enum import Enum


class FaultCode(Enum):
    NONE = 0
    LIMIT_VIOLATION = 10
    OVERLOAD = 20
    EMERGENCY_STOP = 30


def fault_priority(code: FaultCode) -> int:
    # Higher number = higher priority
    return code.value


class FaultLatch:
    def __init__(self):
        self._latched = FaultCode.NONE

    @property
    def latched(self) -> FaultCode:
        return self._latched

    def latch(self, code: FaultCode) -> None:
        if fault_priority(code) > fault_priority(self._latched):
            self._latched = code

    def clear(self) -> None:
        self._latched = FaultCode.NONE

    def has_fault(self) -> bool:
        return self._latched != FaultCode.NONE
