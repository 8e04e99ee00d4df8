#!/usr/bin/env python3
"""Runner for the ant simulator.

Creates a `SimConfig` and a `Simulation`, then lets the ant walk until its
step budget is used up, printing the text grid after every step. The
final state is also written to `output/langton_final.png`.

Usage::

    python scripts/run_one.py
"""
import os
import sys

# Make `src` importable when running from repo root (scripts/ is sibling of src/)
script_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.abspath(os.path.join(script_dir, ".."))
src_dir = os.path.join(project_root, "src")
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

from langton.config import SimConfig
from langton.simulation import Simulation


def print_state(sim):
    ant = sim.ant
    print(f"t={sim.steps_taken}: pos={ant.position} dir={ant.direction.name} steps_left={ant.steps_left}")
    print(sim.snapshot())
    print()


def main():
    cfg = SimConfig(width=11, height=11, steps=60, delay=0.05)
    cfg.validate()
    sim = Simulation(cfg)
    print("Grid:", sim.grid.width, "x", sim.grid.height)
    print("Start:", cfg.start, "facing", sim.ant.direction.name)

    with sim.observe(print_state):
        try:
            sim.run()
        except KeyboardInterrupt:
            sim.stop()

    print("Black cells:", sim.grid.count())
    os.makedirs(os.path.join(project_root, "output"), exist_ok=True)
    sim.save_image(os.path.join(project_root, "output", "langton_final.png"))


if __name__ == "__main__":
    main()
