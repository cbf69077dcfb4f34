"""CLI entry point for particle erosion."""

from __future__ import annotations

import argparse
from datetime import datetime, timezone
from pathlib import Path
import platform
import sys

import numpy as np
from erosion.config import DEFAULT_OUTPUT, SimParams
from erosion.io import HeightmapFormatError, load_height_grid, save_height_grid, write_json
from erosion.pipeline import run_erosion
from erosion.seed import SeedParseError, parse_seed


def build_parser() -> argparse.ArgumentParser:
    defaults = SimParams()
    parser = argparse.ArgumentParser(description="Particle-based hydraulic erosion of a grayscale heightmap")
    parser.add_argument("-f", "--input", required=True, help="Input height image (PGM, PNG, ...)")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT, help="Place the output into <file>")
    parser.add_argument("-a", "--ascii", action="store_true", help="Output is ASCII encoded (plain PGM)")

    sim = parser.add_argument_group("simulation options")
    sim.add_argument("-n", "--particles", type=int, default=defaults.particles, help="Number of particles to simulate")
    sim.add_argument("-t", "--ttl", type=int, default=defaults.ttl, help="Maximum lifetime of a particle")
    sim.add_argument("-r", "--radius", type=int, default=defaults.radius, help="Particle erosion radius")
    sim.add_argument("-e", "--inertia", type=float, default=defaults.inertia, help="Particle inertia coefficient")
    sim.add_argument("-c", "--capacity", type=float, default=defaults.capacity, help="Particle capacity coefficient")
    sim.add_argument("-g", "--gravity", type=float, default=defaults.gravity, help="Gravitational constant")
    sim.add_argument(
        "-v",
        "--evaporation",
        type=float,
        default=defaults.evaporation,
        help="Particle evaporation rate",
    )
    sim.add_argument("-s", "--erosion", type=float, default=defaults.erosion, help="Particle erosion coefficient")
    sim.add_argument(
        "-d",
        "--deposition",
        type=float,
        default=defaults.deposition,
        help="Particle deposition coefficient",
    )
    sim.add_argument("-m", "--min-slope", type=float, default=defaults.min_slope, help="Minimum slope")
    sim.add_argument("--seed", default=None, help="Integer or word seed for reproducible runs (default: random)")

    parser.add_argument(
        "--json",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Write <output>.json run metadata",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        params = SimParams(
            particles=args.particles,
            ttl=args.ttl,
            radius=args.radius,
            inertia=args.inertia,
            capacity=args.capacity,
            gravity=args.gravity,
            evaporation=args.evaporation,
            erosion=args.erosion,
            deposition=args.deposition,
            min_slope=args.min_slope,
        )
    except ValueError as exc:
        parser.error(str(exc))

    seed = None
    if args.seed is not None:
        try:
            seed = parse_seed(args.seed)
        except SeedParseError as exc:
            parser.error(str(exc))

    try:
        grid = load_height_grid(args.input)
    except (OSError, HeightmapFormatError) as exc:
        print(f"Error loading file {args.input}: {exc}", file=sys.stderr)
        return 1

    result = run_erosion(
        grid,
        params,
        seed=seed,
        progress=lambda count: print(f"Particles simulated: {count}"),
    )
    if result.clamped:
        print("Warning: Output image was clipping. Results have been clamped to [0, 1]")
    print("Simulation complete.")

    output = Path(args.output)
    save_height_grid(output, result.grid, ascii=args.ascii)

    metrics = result.metrics
    if args.json:
        write_json(
            output.with_suffix(".json"),
            {
                "input": str(args.input),
                "output": str(output),
                "width": grid.width,
                "height": grid.height,
                "seed": result.seed,
                "clamped": result.clamped,
                "params": params.to_dict(),
                "metrics": {
                    "steps": metrics.steps,
                    "out_of_bounds": metrics.out_of_bounds,
                    "stalled": metrics.stalled,
                    "expired": metrics.expired,
                    "eroded": metrics.eroded,
                    "deposited": metrics.deposited,
                    "velocity_overflows": metrics.velocity_overflows,
                },
                "simulation_seconds": metrics.seconds,
                "generated_at_utc": datetime.now(timezone.utc).isoformat(),
                "python_version": platform.python_version(),
                "numpy_version": np.__version__,
            },
        )

    print(f"Seed: {result.seed}")
    print(
        "Trajectories: "
        f"steps={metrics.steps}, "
        f"out_of_bounds={metrics.out_of_bounds}, "
        f"stalled={metrics.stalled}, "
        f"expired={metrics.expired}"
    )
    print(f"Sediment: eroded={metrics.eroded:.4f}, deposited={metrics.deposited:.4f}")
    print(f"Simulation time: {metrics.seconds:.3f} s ({grid.width}x{grid.height})")
    print(f"Wrote heightmap: {output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
