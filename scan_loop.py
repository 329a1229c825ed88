"""
Title: Scan Loop Driver and Operator Panel
Author: Alex Cooke
Date Created: 2026-10-13
Last Modified: 2026-10-16
Version: 1.3

Purpose:
Provides the external scan driver for the Lift Control System (LCS)
simulation. The OperatorPanel holds latched operator inputs (commands,
emergency stop, load, reset request) behind a lock so the console can change
them while the loop runs. The ScanLoop performs one scan cycle per tick in
the required order and can be driven step-wise or from a background thread.

Scan cycle order:
1. Derive limit switches from the plant position.
2. Take one InputSnapshot from the panel (consumes any pending reset pulse).
3. Run the controller.
4. Force the target velocity to zero while the brake is engaged.
5. Step the plant by the fixed scan period.

Targeted Requirements:
- LCS-FR003: Limit switches are derived from the plant position before the
  controller runs.
- LCS-FR007: Fixed scan cycle order with a fixed simulated timestep.
- LCS-FR008: Newly latched faults are handed to the fault recorder once;
  recorder failures are logged and do not stop the scan cycle.

Scope and Limitations:
- Pacing uses Event.wait and is approximate, not real-time deterministic.
- Cycles are serialised under a lock; the controller and plant never see
  concurrent access.

Safety Notice:
This software is for academic and illustrative purposes only.
It must not be used to control real lifting equipment.

Dependencies:
- Python 3.10+
- threading (standard library)
- math (standard library)
- logging (standard library)
- dataclasses (standard library)
- typing (standard library)

Related Documents:
- LCS Requirements Document
- LCS Scan Cycle and Interface Notes
- LCS Simulation and Test Architecture Notes

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world lifting
or safety-critical systems.
"""

import logging
import math
import threading
from dataclasses import dataclass
from typing import Callable, Optional

from fault_recorder import FaultRecorder
from lift_configuration import LiftConfiguration
from lift_controller import LiftController
from lift_faults import FaultCode
from lift_io import InputSnapshot, OutputSnapshot
from lift_states import LiftState
from sims.plant_model import PlantModel, PlantState

logger = logging.getLogger(__name__)


class OperatorPanel:
    def __init__(self):
        self._lock = threading.Lock()
        self._up = False
        self._down = False
        self._hold = False
        self._estop = False
        self._load_kg = 0.0
        self._reset_pending = False

    def command_up(self) -> None:
        with self._lock:
            self._up, self._down, self._hold = True, False, False

    def command_down(self) -> None:
        with self._lock:
            self._up, self._down, self._hold = False, True, False

    def hold(self) -> None:
        with self._lock:
            self._up, self._down, self._hold = False, False, True

    def stop_commands(self) -> None:
        with self._lock:
            self._up, self._down, self._hold = False, False, False

    def toggle_emergency_stop(self) -> bool:
        with self._lock:
            self._estop = not self._estop
            return self._estop

    def set_emergency_stop(self, asserted: bool) -> None:
        with self._lock:
            self._estop = bool(asserted)

    def request_reset(self) -> None:
        # Arms a one-shot reset pulse for the next snapshot
        with self._lock:
            self._reset_pending = True

    def set_load_kg(self, load_kg: float) -> None:
        load_kg = float(load_kg)
        if not math.isfinite(load_kg) or load_kg < 0.0:
            raise ValueError(f"load must be a non-negative finite number (got {load_kg!r})")
        with self._lock:
            self._load_kg = load_kg

    @property
    def emergency_stop(self) -> bool:
        with self._lock:
            return self._estop

    @property
    def load_kg(self) -> float:
        with self._lock:
            return self._load_kg

    def snapshot(self, top_limit: bool, bottom_limit: bool) -> InputSnapshot:
        with self._lock:
            pulse = self._reset_pending
            self._reset_pending = False
            return InputSnapshot(
                command_up=self._up,
                command_down=self._down,
                command_hold=self._hold,
                emergency_stop=self._estop,
                reset_fault_pulse=pulse,
                top_limit_switch=bool(top_limit),
                bottom_limit_switch=bool(bottom_limit),
                load_kg=self._load_kg,
            )


@dataclass(frozen=True)
class ScanResult:
    cycle: int
    inputs: InputSnapshot
    outputs: OutputSnapshot
    state: LiftState
    fault: FaultCode
    plant: PlantState


class ScanLoop:
    def __init__(self,
                 controller: LiftController,
                 plant: PlantModel,
                 panel: OperatorPanel,
                 config: LiftConfiguration | None = None,
                 fault_recorder: FaultRecorder | None = None,
                 on_tick: Optional[Callable[[ScanResult], None]] = None,):
        self._controller = controller
        self._plant = plant
        self._panel = panel
        self._config = config if config is not None else controller.config
        self._fault_recorder = fault_recorder
        self._on_tick = on_tick

        self._dt = float(self._config.scan_period_s)
        self._period_s = self._dt
        self._cycle_count = 0
        self._last_result: ScanResult | None = None
        self._last_fault = FaultCode.NONE

        self._scan_lock = threading.Lock()
        self._running = False
        self._stop_evt = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def period_s(self) -> float:
        return self._period_s

    @property
    def cycle_count(self) -> int:
        return self._cycle_count

    @property
    def running(self) -> bool:
        return self._running

    @property
    def last_result(self) -> ScanResult | None:
        return self._last_result

    def set_period(self, period_s: float) -> None:
        # Wall-clock pacing only; the simulated timestep stays fixed.
        self._period_s = max(0.01, float(period_s))

    def scan(self) -> ScanResult:
        with self._scan_lock:
            cfg = self._config
            plant = self._plant

            # Derive limit switches BEFORE the controller sees this cycle
            top = plant.at_top(cfg.top_limit_position)
            bottom = plant.at_bottom(cfg.bottom_limit_position)
            inputs = self._panel.snapshot(top_limit=top, bottom_limit=bottom)

            outputs = self._controller.update(inputs, plant)

            if outputs.brake_engaged:
                plant.target_velocity = 0.0
            plant.step(self._dt)

            fault = self._controller.latched_fault
            self._record_new_fault(fault)

            self._cycle_count += 1
            result = ScanResult(
                cycle=self._cycle_count,
                inputs=inputs,
                outputs=outputs,
                state=self._controller.state,
                fault=fault,
                plant=plant.state(),
            )
            self._last_result = result

        if self._on_tick:
            self._on_tick(result)
        return result

    def step(self, n: int = 1) -> ScanResult:
        result = self.scan()
        for _ in range(max(1, int(n)) - 1):
            result = self.scan()
        return result

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        # Fresh event per thread so a late-exiting thread can never be revived
        self._stop_evt = threading.Event()
        self._thread = threading.Thread(target=self._run, args=(self._stop_evt,), daemon=True)
        self._thread.start()
        logger.info("Scan loop started (period=%.3fs, dt=%.3fs)", self._period_s, self._dt)

    def stop(self) -> None:
        if not self._running:
            return
        self._stop_evt.set()
        if self._thread is not None:
            self._thread.join(timeout=1.0)
        self._running = False
        self._thread = None
        logger.info("Scan loop stopped after %d cycles", self._cycle_count)

    def _record_new_fault(self, fault: FaultCode) -> None:
        is_new = fault != self._last_fault and fault != FaultCode.NONE
        self._last_fault = fault

        if not is_new or self._fault_recorder is None:
            return

        try:
            self._fault_recorder.record(fault)
        except OSError:
            logger.exception("Failed to record fault %s", fault.name)

    def _run(self, stop_evt: threading.Event) -> None:
        while not stop_evt.is_set():
            try:
                self.scan()
            except Exception:
                logger.exception("Unhandled exception in scan loop")
            stop_evt.wait(self._period_s)
