"""
Title: Lift Plant Simulation Model (PlantModel)
Author: Alex Cooke
Date Created: 2026-10-12
Last Modified: 2026-10-14
Version: 1.1

Purpose:
Provides a simplified physical model of the lift carriage for the Lift Control
System (LCS) simulation. The controller only expresses intent by writing a
target velocity; this model turns that target into velocity and position over
a fixed timestep with a bounded acceleration (inertia) and hard travel stops.

Targeted Requirements:
- None (supporting analysis, simulation, and test tooling only)

Scope and Limitations:
- Single axis, normalised travel (0.0 = bottom, 1.0 = top).
- Acceleration bound is symmetric and load independent.
- Hard stops are perfectly rigid: residual velocity into a stop is discarded.
- Does not simulate brake slip, motor torque limits, noise or backlash.

Safety Notice:
This software is for academic and illustrative purposes only.
It must not be used to control real lifting equipment.

Dependencies:
- Python 3.10+
- dataclasses (standard library)

Related Documents:
- LCS Requirements Document
- LCS Simulation and Test Architecture Notes

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world lifting
or safety-critical systems.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PlantState:
    position: float  # 0.0 = bottom, 1.0 = top
    velocity: float  # units/s
    target_velocity: float


class PlantModel:
    def __init__(
        self,
        acceleration=3.0,   # units/s^2
        position=0.0,
    ):
        self.acceleration = float(acceleration)

        self._position = min(max(float(position), 0.0), 1.0)
        self._velocity = 0.0
        self._target_velocity = 0.0

    @property
    def position(self) -> float:
        return self._position

    @property
    def velocity(self) -> float:
        return self._velocity

    @property
    def target_velocity(self) -> float:
        return self._target_velocity

    @target_velocity.setter
    def target_velocity(self, value: float) -> None:
        self._target_velocity = float(value)

    def state(self) -> PlantState:
        return PlantState(
            position=self._position,
            velocity=self._velocity,
            target_velocity=self._target_velocity,
        )

    def at_bottom(self, threshold: float) -> bool:
        return self._position <= threshold

    def at_top(self, threshold: float) -> bool:
        return self._position >= threshold

    def step(self, dt: float, target_velocity: float | None = None) -> float:
        # Advance simulation by dt seconds and return position.
        if target_velocity is not None:
            self.target_velocity = target_velocity

        if dt <= 0.0:
            return self._position

        # Smooth towards target velocity (bounded acceleration)
        max_dv = self.acceleration * dt
        dv = self._target_velocity - self._velocity
        dv = max(-max_dv, min(dv, max_dv))
        self._velocity += dv

        self._position += self._velocity * dt
        self._position = max(0.0, min(self._position, 1.0))

        # Hard stops absorb any velocity pushing into them
        if self._position <= 0.0 and self._velocity < 0.0:
            self._velocity = 0.0
        if self._position >= 1.0 and self._velocity > 0.0:
            self._velocity = 0.0

        return self._position

    def reset(self, position: float = 0.0) -> None:
        # Place the carriage at rest at a given position (simulation setup only).
        self._position = min(max(float(position), 0.0), 1.0)
        self._velocity = 0.0
        self._target_velocity = 0.0
