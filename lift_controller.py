"""
Title: Lift Control State Machine (LCS Controller)
Author: Alex Cooke
Date Created: 2026-10-12
Last Modified: 2026-10-15
Version: 1.3

Purpose:
Implements the deterministic scan-cycle controller of the Lift Control System
(LCS). Every cycle the controller latches faults by priority, applies a
safety-gated fault reset, selects exactly one operating state from the latched
fault and the operator inputs, and produces the actuator outputs together with
the target velocity written to the plant model.

Targeted Requirements:
- LCS-FR001: Emergency stop forces FAULTED with the brake engaged and the motor disabled.
- LCS-FR002: A load above the configured maximum is latched as an overload.
- LCS-FR003: Motion is never commanded into an active limit switch; commanding
  into a limit, both limits active or travel past a limit is latched as a
  limit violation.
- LCS-FR004: A fault reset is only honoured with the emergency stop released
  and the carriage stationary; otherwise it is ignored.
- LCS-FR005: Exactly one state per scan cycle; outputs follow the state table
  and the brake is engaged whenever the motor is disabled.

Scope and Limitations:
- Single axis only; no trajectory planning or multi-rate scheduling.
- The controller writes the plant target velocity only; position and
  velocity are owned by the plant model.
- Does not depend on wall-clock time or cycle counts.

Safety Notice:
This software is for academic and illustrative purposes only.
It must not be used to control real lifting equipment.

Related Documents:
- LCS Requirements Document
- LCS System Architecture Description
- LCS Fault Handling and Diagnostics Notes

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world lifting
or safety-critical systems.
"""

# Change Log:
#
# 1.3 (2026-10-15)
#   - Non-finite load readings are treated as an overload rather than
#     silently comparing False against the load threshold.
#   - State and fault log messages are emitted on change only.
#
# 1.2 (2026-10-14)
#   - Tunables moved into LiftConfiguration and injected at construction.
#   - Previous-cycle limit switch values exposed as telemetry.
#
# 1.1 (2026-10-13)
#   - Added commanding-into-limit detection: a command issued into an active
#     limit latches LIMIT_VIOLATION even from HOLDING.
#
# 1.0 (2026-10-12)
#   - Initial scan controller: priority fault latching, gated reset,
#     HOLDING/LIFTING/LOWERING/FAULTED state decision and output table.


import logging
import math

from lift_configuration import LiftConfiguration
from lift_faults import FaultCode, FaultLatch
from lift_io import InputSnapshot, OutputSnapshot
from lift_states import LiftState, MotorDirection
from sims.plant_model import PlantModel

logger = logging.getLogger(__name__)


class LiftController:
    def __init__(self, config: LiftConfiguration | None = None):
        self._config = config if config is not None else LiftConfiguration()

        self._state = LiftState.HOLDING
        self._faults = FaultLatch()
        self._last_outputs = OutputSnapshot()

        # Telemetry only, not used by any decision
        self._last_top_limit = False
        self._last_bottom_limit = False

        # Remember last reported values (to avoid continuous spamming)
        self._last_logged_fault = FaultCode.NONE

    # -------------------------
    # Properties / small helpers
    # -------------------------

    @property
    def config(self) -> LiftConfiguration:
        return self._config

    @property
    def state(self) -> LiftState:
        return self._state

    @property
    def faults(self) -> FaultLatch:
        return self._faults

    @property
    def latched_fault(self) -> FaultCode:
        return self._faults.latched

    @property
    def last_outputs(self) -> OutputSnapshot:
        return self._last_outputs

    @property
    def last_top_limit(self) -> bool:
        return self._last_top_limit

    @property
    def last_bottom_limit(self) -> bool:
        return self._last_bottom_limit

    def log(self, msg: str) -> None:
        logger.info(msg)

    def enter_state(self, new_state: LiftState) -> None:
        if new_state != self._state:
            self.log(f"State: {self._state.name} -> {new_state.name}")
        self._state = new_state

    # -------------------------
    # Core scan cycle
    # -------------------------

    def update(self, inputs: InputSnapshot, plant: PlantModel) -> OutputSnapshot:
        # Runs one scan cycle: latch -> reset -> decide -> actuate
        self._latch_faults(inputs)
        self._apply_fault_reset(inputs, plant.velocity)
        self.enter_state(self._decide_state(inputs))

        target_velocity, outputs = self._generate_outputs(inputs)
        plant.target_velocity = target_velocity

        self._last_top_limit = inputs.top_limit_switch
        self._last_bottom_limit = inputs.bottom_limit_switch
        self._last_outputs = outputs
        return outputs

    # -------------------------
    # Step 1: fault latching
    # -------------------------

    def _latch_faults(self, inputs: InputSnapshot) -> None:
        if inputs.emergency_stop:
            self._latch(FaultCode.EMERGENCY_STOP)

        if self._is_overloaded(inputs.load_kg):
            self._latch(FaultCode.OVERLOAD)

        top = inputs.top_limit_switch
        bottom = inputs.bottom_limit_switch

        if top and bottom:
            # Both limits at once: sensor inconsistency
            self._latch(FaultCode.LIMIT_VIOLATION)
            return

        # Overran a limit while moving towards it
        if self._state == LiftState.LIFTING and top:
            self._latch(FaultCode.LIMIT_VIOLATION)
        if self._state == LiftState.LOWERING and bottom:
            self._latch(FaultCode.LIMIT_VIOLATION)

        # Commanding into an active limit
        if inputs.command_up and top:
            self._latch(FaultCode.LIMIT_VIOLATION)
        if inputs.command_down and bottom:
            self._latch(FaultCode.LIMIT_VIOLATION)

    def _is_overloaded(self, load_kg: float) -> bool:
        load_kg = float(load_kg)
        if not math.isfinite(load_kg):
            # Unreadable load cell: assume the worst
            return True
        return load_kg > self._config.max_load_kg

    def _latch(self, code: FaultCode) -> None:
        self._faults.latch(code)

        if self._faults.latched != self._last_logged_fault:
            self.log(f"Fault latched: {self._faults.latched.name}")
            self._last_logged_fault = self._faults.latched

    # -------------------------
    # Step 2: gated fault reset
    # -------------------------

    def _apply_fault_reset(self, inputs: InputSnapshot, velocity: float) -> None:
        if not inputs.reset_fault_pulse:
            return

        if not self._faults.has_fault():
            # Nothing to clear
            return

        if inputs.emergency_stop:
            self.log("Fault reset rejected: emergency stop asserted")
            return

        if abs(velocity) >= self._config.stationary_epsilon:
            self.log(f"Fault reset rejected: lift moving (velocity={velocity:.3f})")
            return

        self.log(f"Fault cleared: {self._faults.latched.name}")
        self._faults.clear()
        self._last_logged_fault = FaultCode.NONE

    # -------------------------
    # Step 3: state decision
    # -------------------------

    def _decide_state(self, inputs: InputSnapshot) -> LiftState:
        if self._faults.has_fault():
            return LiftState.FAULTED

        up = inputs.command_up
        down = inputs.command_down

        if up and not down and not inputs.top_limit_switch:
            return LiftState.LIFTING

        if down and not up and not inputs.bottom_limit_switch:
            return LiftState.LOWERING

        # No command, conflicting commands, explicit hold or blocked by own limit
        return LiftState.HOLDING

    # -------------------------
    # Step 4: outputs + safe stopping
    # -------------------------

    def _generate_outputs(self, inputs: InputSnapshot) -> tuple[float, OutputSnapshot]:
        stopped = OutputSnapshot(
            motor_enable=False,
            motor_direction=MotorDirection.NONE,
            brake_engaged=True,
            fault_lamp=False,
        )

        if self._state == LiftState.FAULTED:
            return 0.0, OutputSnapshot(
                motor_enable=False,
                motor_direction=MotorDirection.NONE,
                brake_engaged=True,
                fault_lamp=True,
            )

        if self._state == LiftState.LIFTING:
            if inputs.top_limit_switch:
                return 0.0, stopped
            return self._config.lift_speed, OutputSnapshot(
                motor_enable=True,
                motor_direction=MotorDirection.UP,
                brake_engaged=False,
                fault_lamp=False,
            )

        if self._state == LiftState.LOWERING:
            if inputs.bottom_limit_switch:
                return 0.0, stopped
            return -self._config.lower_speed, OutputSnapshot(
                motor_enable=True,
                motor_direction=MotorDirection.DOWN,
                brake_engaged=False,
                fault_lamp=False,
            )

        return 0.0, stopped
