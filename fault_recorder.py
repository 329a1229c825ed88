"""
Title: Fault Recorder Utility
Author: Alex Cooke
Date Created: 2026-10-13
Last Modified: 2026-10-13
Version: 1.0

Purpose:
Provides a simple, append-only fault history for the Lift Control System (LCS)
simulation. The scan loop hands every newly latched fault to the recorder,
which timestamps it using an injected clock and appends it to a text file for
later inspection.

Targeted Requirements:
- LCS-FR008: Record newly latched faults with timestamp and code to
  non-volatile storage.

Scope and Limitations:
- File-based and append-only; one "timestamp,fault_code" line per record.
- No de-duplication or rollover handling.
- Lives with the scan driver; the lift controller itself performs no I/O.

Safety Notice:
This software is for academic and illustrative purposes only.
It must not be used to control real lifting equipment.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- pathlib (standard library)
- typing (standard library)

Related Documents:
- LCS Requirements Document
- LCS Fault Handling and Diagnostics Notes

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world lifting
or safety-critical systems.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from lift_faults import FaultCode


@dataclass(frozen=True)
class FaultRecord:
    timestamp_s: float
    fault_code: FaultCode


class FaultRecorder:
    def __init__(self, filepath: str | Path, clock: Callable[[], float]):
        self._path = Path(filepath)
        self._clock = clock
        self._records: list[FaultRecord] = []

        # Ensures directory exists for persistence target.
        self._path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def records(self) -> list[FaultRecord]:
        return list(self._records)

    def record(self, fault_code: FaultCode) -> FaultRecord:
        # Records a fault code with timestamp to non-volatile storage (append-only).
        rec = FaultRecord(timestamp_s=float(self._clock()), fault_code=fault_code)

        with self._path.open("a", encoding="utf-8") as f:
            f.write(f"{rec.timestamp_s:.6f},{rec.fault_code.name}\n")

        self._records.append(rec)
        return rec
