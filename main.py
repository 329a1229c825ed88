#!/usr/bin/env python3
import logging
import signal
import time
from pathlib import Path
from threading import Event

from app_context import AppContext
from cli import StateAnnunciator, StatusPrinter, command_loop
from fault_recorder import FaultRecorder
from lift_configuration import LiftConfiguration
from lift_controller import LiftController
from scan_loop import OperatorPanel, ScanLoop, ScanResult
from sims.plant_model import PlantModel


def setup_logging():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def setup_signal_handlers(ctx: AppContext):
    def _handle_shutdown(signum, frame):
        logging.info("Shutdown signal received (%s)", signum)
        ctx.shutdown()

    signal.signal(signal.SIGINT, _handle_shutdown)
    signal.signal(signal.SIGTERM, _handle_shutdown)


def initialize(fault_log: str | Path | None = "fault_log.txt") -> AppContext:
    logging.info("Initializing application")

    config = LiftConfiguration(name="LIFT-1")
    logging.info(
        "Full stroke time: lift=%.2fs lower=%.2fs",
        config.compute_lift_time_s(),
        config.compute_lower_time_s(),
    )

    clock = time.monotonic
    plant = PlantModel(acceleration=config.plant_acceleration, position=0.0)
    controller = LiftController(config=config)
    panel = OperatorPanel()

    fault_recorder = None
    if fault_log is not None:
        fault_recorder = FaultRecorder(filepath=fault_log, clock=clock)

    annunciator = StateAnnunciator()
    status = StatusPrinter(every_n=10)

    def on_tick(result: ScanResult) -> None:
        annunciator(controller)
        status(result)

    loop = ScanLoop(
        controller=controller,
        plant=plant,
        panel=panel,
        config=config,
        fault_recorder=fault_recorder,
        on_tick=on_tick,
    )

    return AppContext(
        controller=controller,
        plant=plant,
        panel=panel,
        loop=loop,
        config=config,
        clock=clock,
        shutdown_event=Event(),
        fault_recorder=fault_recorder,
    )


def main():
    setup_logging()
    ctx = initialize()
    setup_signal_handlers(ctx)

    ctx.loop.start()
    try:
        command_loop(ctx)
    finally:
        ctx.loop.stop()

    logging.info("Main loop terminated")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
