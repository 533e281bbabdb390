#!/usr/bin/env python3
"""
Debug script for step-by-step visualization of crystal growth.

Runs the sketch frame by frame and writes an SVG snapshot every few frames,
together with the JSON state of the crystal at that point.

Usage:
    python debug_generation.py [options]

Options:
    -s, --seed SEED     Random seed (default: 12345)
    -f, --frames N      Number of frames (default: 40)
    -e, --every N       Snapshot every N frames (default: 5)
    -c, --config FILE   Settings JSON file
    -o, --output DIR    Output directory (default: ./debug_output)
"""

import argparse
import os
import sys

from crystallisation.config import Settings
from crystallisation.export import export_svg, export_to_json
from crystallisation.log import configure_logging
from crystallisation.sketch import Sketch


def main():
    parser = argparse.ArgumentParser(
        description='Debug crystal growth with step-by-step snapshots'
    )
    parser.add_argument(
        '-s', '--seed',
        type=int,
        default=12345,
        help='Random seed (default: 12345)'
    )
    parser.add_argument(
        '-f', '--frames',
        type=int,
        default=40,
        help='Number of frames (default: 40)'
    )
    parser.add_argument(
        '-e', '--every',
        type=int,
        default=5,
        help='Snapshot every N frames (default: 5)'
    )
    parser.add_argument(
        '-c', '--config',
        type=str,
        default=None,
        help='Settings JSON file'
    )
    parser.add_argument(
        '-o', '--output',
        type=str,
        default='./debug_output',
        help='Output directory (default: ./debug_output)'
    )

    args = parser.parse_args()
    configure_logging(verbose=True)

    settings = Settings.load(args.config) if args.config else Settings()

    print("=" * 60)
    print("Crystallisation - Debug Visualization")
    print("=" * 60)
    print(f"Seed: {args.seed}")
    print(f"Frames: {args.frames} (snapshot every {args.every})")
    print(f"Settings: {settings.to_dict()}")
    print(f"Output: {args.output}")
    print("=" * 60)

    os.makedirs(args.output, exist_ok=True)

    sketch = Sketch(400, 400, settings, args.seed)
    sketch.start()

    for frame in range(1, args.frames + 1):
        accepted = sketch.tick()
        print(f"Frame {frame}: +{accepted} splits, {len(sketch.crystal.polygons)} polygons")

        if frame % args.every == 0 or frame == args.frames:
            base = os.path.join(args.output, f"frame_{frame:04d}")
            export_svg(sketch.canvas, base + ".svg")
            export_to_json(sketch.crystal, base + ".json")

        if not sketch.running:
            print("Crystal exhausted")
            break

    print("\n" + "=" * 60)
    print("Visualization complete!")
    print(f"Stats: {sketch.stats()}")
    print(f"Output files saved to: {os.path.abspath(args.output)}")
    print("=" * 60)

    print("\nGenerated files:")
    for f in sorted(os.listdir(args.output)):
        if f.endswith('.svg'):
            filepath = os.path.join(args.output, f)
            size = os.path.getsize(filepath)
            print(f"  - {f} ({size:,} bytes)")

    return 0


if __name__ == '__main__':
    sys.exit(main())
