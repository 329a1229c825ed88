"""
Title: Lift Tuning and Timing Configuration Model (LiftConfiguration)
Author: Alex Cooke
Date Created: 2026-10-12
Last Modified: 2026-10-14
Version: 1.2

Purpose:
Defines an immutable data model holding the tunable constants of the Lift
Control System (LCS): load threshold, commanded lift/lower speeds, the
stationary threshold used to gate fault resets, the plant acceleration bound
and the scan driver settings (scan period and limit switch trip points).
Provides pure worst-case timing calculations derived from those constants.

Targeted Requirements:
- LCS-FR002: Provides the maximum permitted load used for overload detection.
- LCS-FR004: Provides the stationary threshold used to gate fault resets.
- LCS-PR001: Provides computed full stroke timing for lift and lower.

Scope and Limitations:
- Values are fixed once instantiated; no runtime re-tuning.
- Timing calculations assume a full stroke of 1.0 travel units, a
  trapezoidal velocity profile and no load-dependent dynamics.

Safety Notice:
This software is for academic and illustrative purposes only.
It must not be used to control real lifting equipment.

Dependencies:
- Python 3.10+
- dataclasses (standard library)
- math (standard library)

Related Documents:
- LCS Requirements Document
- LCS System Architecture Description
- LCS Timing Derivation Records

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world lifting
or safety-critical systems.
"""

import math
from dataclasses import dataclass

FULL_STROKE = 1.0


@dataclass(frozen=True)
class LiftConfiguration:
    # Immutable lift tuning configuration.
    name: str = "LIFT-1"
    max_load_kg: float = 1200.0
    lift_speed: float = 0.35          # units/s
    lower_speed: float = 0.30         # units/s
    stationary_epsilon: float = 0.01  # units/s
    plant_acceleration: float = 3.0   # units/s^2

    # Scan driver settings
    scan_period_s: float = 0.02
    bottom_limit_position: float = 0.0001
    top_limit_position: float = 0.9999

    def __post_init__(self) -> None:
        for field_name in (
            "max_load_kg",
            "lift_speed",
            "lower_speed",
            "stationary_epsilon",
            "plant_acceleration",
            "scan_period_s",
        ):
            value = getattr(self, field_name)
            if not math.isfinite(float(value)) or value <= 0.0:
                raise ValueError(f"{field_name} must be a positive finite number (got {value!r})")

        if not 0.0 < self.bottom_limit_position < self.top_limit_position < FULL_STROKE:
            raise ValueError(
                "limit positions must satisfy 0 < bottom_limit_position < top_limit_position < 1 "
                f"(got bottom={self.bottom_limit_position!r}, top={self.top_limit_position!r})"
            )

    def compute_ramp_time_s(self, speed: float) -> float:
        # Time to accelerate from rest to the given speed.
        return abs(speed) / self.plant_acceleration

    def compute_stopping_distance(self, speed: float) -> float:
        # Distance covered while decelerating from the given speed to rest.
        return (speed * speed) / (2.0 * self.plant_acceleration)

    def compute_travel_time_s(self, speed: float) -> float:
        # Worst-case full stroke time from rest at one end to the other end.
        # Pure calculation, no side effects.
        speed = abs(speed)
        ramp_distance = self.compute_stopping_distance(speed)

        if ramp_distance >= FULL_STROKE:
            # Never reaches cruise speed within one stroke.
            return math.sqrt(2.0 * FULL_STROKE / self.plant_acceleration)

        return self.compute_ramp_time_s(speed) + (FULL_STROKE - ramp_distance) / speed

    def compute_lift_time_s(self) -> float:
        return self.compute_travel_time_s(self.lift_speed)

    def compute_lower_time_s(self) -> float:
        return self.compute_travel_time_s(self.lower_speed)
