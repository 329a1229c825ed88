#!/usr/bin/env python3
"""
Title: Lift Operator Console
Author: Alex Cooke
Date Created: 2026-10-13
Last Modified: 2026-10-16
Version: 1.2

Purpose:
Provides the interactive text console of the Lift Control System (LCS)
simulation. Operator commands are parsed into OperatorPanel changes and scan
loop control; the controller state is annunciated on change and a status line
is printed periodically while the scan loop runs.

Targeted Requirements:
- None (supporting simulation and operator tooling only)

Scope and Limitations:
- Line-based stdin input; no key-level or non-blocking input.
- Console output only; nothing here takes part in control decisions.

Safety Notice:
This software is for academic and illustrative purposes only.
It must not be used to control real lifting equipment.

Dependencies:
- Python 3.10+
- app_context.py
- scan_loop.py

Related Documents:
- LCS Requirements Document
- LCS Console and Simulation Test Architecture Notes

Safety and Certification Disclaimer:
All artefacts in this repository are produced for academic assessment purposes only.
They do not represent certified software and must not be used in real-world lifting
or safety-critical systems.
"""

from app_context import AppContext
from lift_states import LiftState
from scan_loop import ScanResult

PROMPT = "> "


class StateAnnunciator:
    # Prints the controller state only when it changes.
    def __init__(self):
        self._last: LiftState | None = None

    def __call__(self, controller) -> None:
        state = controller.state
        if state != self._last:
            print(f"STATE: {state.name}")
            self._last = state


class StatusPrinter:
    # Prints a status line every `every_n` scan cycles (10 x 20 ms = 200 ms).
    def __init__(self, every_n: int = 10):
        self._every_n = max(1, int(every_n))

    def __call__(self, result: ScanResult) -> None:
        if (result.cycle - 1) % self._every_n == 0:
            print(format_status(result))


def format_status(result: ScanResult) -> str:
    return (
        f"pos={result.plant.position:.3f}"
        f" vel={result.plant.velocity:.3f}"
        f" state={result.state.name}"
        f" fault={result.fault.name}"
        f" top={int(result.inputs.top_limit_switch)}"
        f" bot={int(result.inputs.bottom_limit_switch)}"
        f" load={result.inputs.load_kg:.3f}"
        f" estop={int(result.inputs.emergency_stop)}"
    )


def _print_status(ctx: AppContext) -> None:
    cfg = ctx.config
    print("\n=== STATUS ===")
    print(f"State: {ctx.controller.state.name}")
    print(f"Fault: {ctx.controller.latched_fault.name}")
    print(f"Position: {ctx.plant.position:.4f}  Velocity: {ctx.plant.velocity:.4f}")
    print(f"TargetVelocity: {ctx.plant.target_velocity:.4f}")
    print(f"Load_kg: {ctx.panel.load_kg:.1f}  (max {cfg.max_load_kg:.1f})")
    print(f"EmergencyStop: {ctx.panel.emergency_stop}")
    print(f"Outputs: {ctx.controller.last_outputs}")
    print(f"Loop: running={ctx.loop.running} cycles={ctx.loop.cycle_count} period={ctx.loop.period_s:.3f}s")
    print(f"FullStroke_s: lift={cfg.compute_lift_time_s():.2f} lower={cfg.compute_lower_time_s():.2f}")
    print("=============\n")


def print_help() -> None:
    print(
        """
Commands
  help                         Print help
  q                            Quit

Operator inputs
  u                            Command up
  d                            Command down
  h                            Hold
  s                            Stop commands (clear u/d/h)
  e                            Toggle emergency stop
  r                            Reset fault (only if stopped + estop released)
  l <kg>                       Set load kg (e.g. l 900 or l900)

Loop control
  run [period_s]               Start background scan loop
  stop                         Stop background scan loop
  step [n]                     Run n scan cycles (default 1)

Diagnostics
  state                        Print controller state and latched fault
  status                       Print full status block
"""
    )


def handle_command(ctx: AppContext, line: str) -> bool:
    # Returns False when the console should quit.
    parts = line.strip().split()
    if not parts:
        return True

    op = parts[0].lower()
    panel = ctx.panel

    if op.startswith("l") and len(op) > 1:
        # Load value glued to the command, e.g. "l900"
        parts = ["l", parts[0][1:]] + parts[1:]
        op = "l"

    if op in ("q", "quit", "exit"):
        return False

    if op in ("help", "?"):
        print_help()
    elif op == "u":
        panel.command_up()
    elif op == "d":
        panel.command_down()
    elif op == "h":
        panel.hold()
    elif op == "s":
        panel.stop_commands()
    elif op == "e":
        asserted = panel.toggle_emergency_stop()
        print(f"Emergency stop {'ASSERTED' if asserted else 'released'}")
    elif op == "r":
        panel.request_reset()
    elif op == "l":
        try:
            panel.set_load_kg(float(parts[1]))
        except (IndexError, ValueError):
            print("Bad load value.")
    elif op == "run":
        if len(parts) >= 2:
            try:
                ctx.loop.set_period(float(parts[1]))
            except ValueError:
                print("Usage: run [period_s]")
                return True
        ctx.loop.start()
        print(f"Loop running @ {ctx.loop.period_s:.3f}s")
    elif op == "stop":
        ctx.loop.stop()
        print("Loop stopped")
    elif op == "step":
        try:
            n = int(parts[1]) if len(parts) >= 2 else 1
        except ValueError:
            print("Usage: step [n]")
            return True
        ctx.loop.step(n)
        print(f"Stepped {max(1, n)} cycles")
    elif op == "state":
        print(f"{ctx.controller.state.name} fault={ctx.controller.latched_fault.name}")
    elif op == "status":
        _print_status(ctx)
    else:
        print("Unknown command. Type 'help'.")

    return True


def command_loop(ctx: AppContext) -> None:
    print_help()
    while not ctx.shutdown_event.is_set():
        try:
            line = input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            ctx.shutdown()
            break

        if not handle_command(ctx, line):
            ctx.shutdown()
            break
