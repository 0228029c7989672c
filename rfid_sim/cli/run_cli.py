# rfid_sim/cli/run_cli.py
import argparse
import json
import logging
import sys

import yaml

from rfid_sim.config import ScenarioLoader
from rfid_sim.core.event_bus import EventBus
from rfid_sim.core.scheduler import Scheduler
from rfid_sim.core.transforms import TransformBuffer
from rfid_sim.sensors.rfid_reader import RfidReader
from rfid_sim.utils.errors import SimError, error_dict, success_dict
from rfid_sim.utils.logger import setup_logging
from rfid_sim.world import Robot, World


def build_simulation(scenario, out=None, debug=False):
    """Wire a scenario into a scheduler, a world and its RFID readers.

    Each detection report is written to ``out`` as one JSON line when given.

    Returns:
        tuple: (scheduler, world, readers)
    """
    scheduler = Scheduler(dt=scenario.dt)
    event_bus = EventBus()
    event_bus.enable_debug(debug)
    transforms = TransformBuffer()
    world = World(event_bus, transforms)

    def write_report(report):
        out.write(json.dumps(report.to_dict()) + "\n")

    readers = []
    for sensor_config in scenario.robot.rfid_sensors:
        reader = RfidReader(
            scenario.map_info,
            sensor_config,
            transforms,
            namespace=scenario.robot.namespace,
            event_bus=event_bus,
            clock=scheduler.now,
        )
        if out is not None:
            event_bus.subscribe(reader.topic, write_report)
        readers.append(reader)

    robot = Robot(
        scenario.robot.namespace,
        pose=scenario.robot.pose,
        linear_velocity=scenario.robot.linear_velocity,
        angular_velocity=scenario.robot.angular_velocity,
    )
    world.add_robot(robot, readers)
    for tag in scenario.tags:
        world.add_tag(tag)

    # World first so readers see this tick's robot pose
    scheduler.add_periodic("world", scenario.dt, lambda now: world.step(scenario.dt))
    for reader in readers:
        reader.register(scheduler)

    return scheduler, world, readers


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run the RFID reader simulation")
    parser.add_argument("--scenario", required=True, help="Path to scenario YAML or JSON")
    parser.add_argument("--time", type=float, default=5.0, help="Simulation time in seconds")
    parser.add_argument("--realtime", action="store_true", help="Pace the simulation to wall-clock time")
    parser.add_argument("--log-file", default=None, help="Log file or directory")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    setup_logging(args.log_file, logging.DEBUG if args.verbose else logging.INFO)

    try:
        scenario = ScenarioLoader.load(args.scenario)
    except (OSError, ValueError, yaml.YAMLError, SimError) as e:
        print(json.dumps(error_dict("SCENARIO_LOAD_FAILED", str(e))))
        return 1

    scheduler, world, readers = build_simulation(scenario, out=sys.stdout, debug=args.verbose)
    scheduler.run(args.time, realtime=args.realtime)
    scheduler.stop()

    summary = success_dict(
        f"Ran {scenario.name} for {scheduler.time:.2f}s",
        readers=[reader.get_state() for reader in readers],
        tags=len(world.tags),
    )
    print(json.dumps(summary))
    return 0


if __name__ == "__main__":
    sys.exit(main())
