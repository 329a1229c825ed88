"""
Title: Lift Closed-Loop Scenario Tests
Author: Alex Cooke
Date Created: 2026-10-14
Last Modified: 2026-10-15
Version: 1.0

Purpose:
Verifies the controller and plant model together through the ScanLoop at
the reference 50 Hz scan rate: full-stroke lifting into the top limit,
emergency stop while lifting, overload latch and reset, and randomized
operator sequences checked against the cycle invariants.

Scope and Limitations:
- Uses ScanLoop.scan() directly; no background thread or wall-clock pacing.

Dependencies:
- Python 3.10+
- pytest
"""

import random

import pytest

from lift_configuration import LiftConfiguration
from lift_controller import LiftController
from lift_faults import FaultCode
from lift_states import LiftState, MotorDirection
from scan_loop import OperatorPanel, ScanLoop
from sims.plant_model import PlantModel

DT = 0.02


def make_system(position: float = 0.0):
    config = LiftConfiguration(name="TEST", scan_period_s=DT)
    plant = PlantModel(acceleration=config.plant_acceleration, position=position)
    controller = LiftController(config=config)
    panel = OperatorPanel()
    loop = ScanLoop(controller=controller, plant=plant, panel=panel, config=config)
    return loop, controller, plant, panel


class TestScenarioLiftToTop:
    def test_lifts_from_bottom_until_top_limit(self):
        loop, controller, plant, panel = make_system(position=0.0)
        panel.command_up()

        previous_velocity = 0.0
        previous_position = 0.0
        peak_velocity = 0.0
        limit_result = None

        for _ in range(500):
            result = loop.scan()

            if result.inputs.top_limit_switch:
                limit_result = result
                break

            assert result.state == LiftState.LIFTING
            assert result.outputs.motor_enable is True
            assert result.outputs.motor_direction == MotorDirection.UP

            # Inertia: velocity rises by at most accel * dt per cycle
            assert result.plant.velocity - previous_velocity <= 3.0 * DT + 1e-9
            assert result.plant.velocity <= 0.35 + 1e-9
            assert result.plant.position >= previous_position

            previous_velocity = result.plant.velocity
            previous_position = result.plant.position
            peak_velocity = max(peak_velocity, result.plant.velocity)

        assert limit_result is not None, "top limit was never reached"
        assert peak_velocity == pytest.approx(0.35)

        # Same cycle the limit trips: motor off, target snapped to zero
        assert limit_result.outputs.motor_enable is False
        assert limit_result.outputs.brake_engaged is True
        assert limit_result.plant.target_velocity == 0.0
        assert controller.latched_fault == FaultCode.LIMIT_VIOLATION
        assert limit_result.state == LiftState.FAULTED

    def test_full_stroke_time_matches_configuration(self):
        loop, controller, plant, panel = make_system(position=0.0)
        panel.command_up()

        cycles = 0
        while not plant.at_top(controller.config.top_limit_position):
            loop.scan()
            cycles += 1
            assert cycles < 500

        expected_s = controller.config.compute_lift_time_s()
        assert cycles * DT == pytest.approx(expected_s, abs=2 * DT)

    def test_carriage_settles_at_top_stop(self):
        loop, controller, plant, panel = make_system(position=0.0)
        panel.command_up()
        loop.step(300)

        assert plant.position == 1.0
        assert plant.velocity == 0.0


class TestScenarioEmergencyStopWhileLifting:
    def test_estop_faults_immediately_and_reset_is_ignored_while_asserted(self):
        loop, controller, plant, panel = make_system(position=0.0)
        panel.command_up()

        loop.step(5)
        assert controller.state == LiftState.LIFTING
        assert plant.velocity == pytest.approx(0.3)

        panel.set_emergency_stop(True)
        result = loop.scan()

        assert result.state == LiftState.FAULTED
        assert result.fault == FaultCode.EMERGENCY_STOP
        assert result.outputs.brake_engaged is True
        assert result.outputs.motor_enable is False
        assert result.plant.target_velocity == 0.0

        panel.request_reset()
        result = loop.scan()

        assert result.inputs.reset_fault_pulse is True
        assert result.state == LiftState.FAULTED
        assert controller.latched_fault == FaultCode.EMERGENCY_STOP

    def test_reset_after_release_waits_for_carriage_to_stop(self):
        loop, controller, plant, panel = make_system(position=0.0)
        panel.command_up()
        loop.step(5)

        panel.set_emergency_stop(True)
        loop.scan()
        panel.set_emergency_stop(False)
        panel.stop_commands()

        # Still decelerating: reset is ignored
        panel.request_reset()
        result = loop.scan()
        assert result.inputs.reset_fault_pulse is True
        assert plant.velocity > 0.0
        assert controller.latched_fault == FaultCode.EMERGENCY_STOP

        loop.step(20)
        assert plant.velocity == 0.0

        panel.request_reset()
        result = loop.scan()
        assert result.fault == FaultCode.NONE
        assert result.state == LiftState.HOLDING


class TestScenarioOverload:
    def test_overload_latches_and_clears_after_load_reduced(self):
        loop, controller, plant, panel = make_system(position=0.0)

        panel.set_load_kg(1500.0)
        result = loop.scan()
        assert result.fault == FaultCode.OVERLOAD
        assert result.state == LiftState.FAULTED

        panel.set_load_kg(500.0)
        result = loop.scan()
        assert result.fault == FaultCode.OVERLOAD, "overload must not auto-clear"

        panel.request_reset()
        result = loop.scan()
        assert result.fault == FaultCode.NONE
        assert controller.faults.has_fault() is False

        result = loop.scan()
        assert result.state == LiftState.HOLDING
        assert result.outputs.fault_lamp is False

    def test_lift_can_move_again_after_reset(self):
        loop, controller, plant, panel = make_system(position=0.0)
        panel.set_load_kg(1500.0)
        loop.scan()

        panel.set_load_kg(500.0)
        panel.request_reset()
        loop.scan()

        panel.command_up()
        loop.step(10)
        assert controller.state == LiftState.LIFTING
        assert plant.position > 0.0


class TestLimitSafety:
    def test_command_up_at_top_from_holding_latches_without_motion(self):
        loop, controller, plant, panel = make_system(position=1.0)
        loop.scan()
        assert controller.state == LiftState.HOLDING

        panel.command_up()
        result = loop.scan()

        assert result.fault == FaultCode.LIMIT_VIOLATION
        assert result.outputs.motor_enable is False
        assert result.plant.target_velocity == 0.0
        assert plant.position == 1.0

    def test_lowering_to_bottom_stops_at_limit(self):
        loop, controller, plant, panel = make_system(position=0.5)
        panel.command_down()
        loop.step(400)

        assert plant.position == 0.0
        assert plant.velocity == 0.0
        assert controller.latched_fault == FaultCode.LIMIT_VIOLATION


class TestRandomizedInvariants:
    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_invariants_hold_for_random_operator_sequences(self, seed):
        rng = random.Random(seed)
        loop, controller, plant, panel = make_system(position=rng.uniform(0.0, 1.0))

        actions = [
            panel.command_up,
            panel.command_down,
            panel.hold,
            panel.stop_commands,
            panel.toggle_emergency_stop,
            panel.request_reset,
            lambda: panel.set_load_kg(rng.choice([0.0, 500.0, 1199.0, 1500.0])),
        ]

        for _ in range(3000):
            if rng.random() < 0.05:
                rng.choice(actions)()

            result = loop.scan()
            out = result.outputs

            assert 0.0 <= result.plant.position <= 1.0
            assert (result.state == LiftState.FAULTED) == controller.faults.has_fault()
            assert out.fault_lamp == (result.state == LiftState.FAULTED)

            if result.state in (LiftState.HOLDING, LiftState.FAULTED):
                assert out.brake_engaged is True
                assert out.motor_enable is False
                assert result.plant.target_velocity == 0.0

            # Never drive into an active limit
            if result.inputs.top_limit_switch:
                assert out.motor_direction != MotorDirection.UP
            if result.inputs.bottom_limit_switch:
                assert out.motor_direction != MotorDirection.DOWN

            # No residual velocity pushing into a hard stop
            if result.plant.position >= 1.0:
                assert result.plant.velocity <= 0.0
            if result.plant.position <= 0.0:
                assert result.plant.velocity >= 0.0
