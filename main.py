#!/usr/bin/env python3
"""
Main entry point for Crystallisation
"""
import argparse
import dataclasses
import sys
from crystallisation.config import Settings, PRESETS
from crystallisation.log import configure_logging
from crystallisation.sketch import Sketch


def build_settings(args):
    """Settings from preset or config file, overridden by explicit flags"""
    if args.config:
        settings = Settings.load(args.config)
    else:
        settings = dataclasses.replace(PRESETS[args.preset])

    overrides = {
        "iterations": args.iterations,
        "randomness": args.randomness,
        "opposite_bias": args.opposite,
        "min_angle": args.min_angle,
        "min_side": args.min_side,
    }
    settings.update(**{k: v for k, v in overrides.items() if v is not None})
    return settings


def main():
    parser = argparse.ArgumentParser(description='Crystallisation - stained glass pattern generator')
    parser.add_argument('-W', '--width', type=int, default=800,
                        help='Canvas width (default: 800)')
    parser.add_argument('-H', '--height', type=int, default=600,
                        help='Canvas height (default: 600)')
    parser.add_argument('--seed', type=int, default=-1,
                        help='Random seed (-1 for random)')
    parser.add_argument('-f', '--frames', type=int, default=200,
                        help='Number of frames to run (default: 200)')
    parser.add_argument('--preset', choices=sorted(PRESETS), default='default',
                        help='Named settings to start from')
    parser.add_argument('-c', '--config', type=str, default=None,
                        help='Load settings from a JSON file')
    parser.add_argument('--save-config', type=str, default=None,
                        help='Write the effective settings to a JSON file')
    parser.add_argument('-i', '--iterations', type=int, default=None,
                        help='Growth steps per frame')
    parser.add_argument('-r', '--randomness', type=float, default=None,
                        help='Split point randomness (0-1)')
    parser.add_argument('--opposite', type=float, default=None,
                        help='Probability of cutting towards the opposite side (0-1)')
    parser.add_argument('--min-angle', type=float, default=None,
                        help='Minimum slice angle in radians')
    parser.add_argument('--min-side', type=float, default=None,
                        help='Minimum slice side length')
    parser.add_argument('--clear', action='store_true',
                        help='Blank the canvas and draw only the fracture lines before saving')
    parser.add_argument('-o', '--output', type=str, default='crystal.svg',
                        help='Output file: .svg, .png or .json (default: crystal.svg)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Debug logging')
    parser.add_argument('--json-logs', action='store_true',
                        help='Emit log records as JSON')

    args = parser.parse_args()
    configure_logging(args.verbose, args.json_logs)

    try:
        settings = build_settings(args)
        for problem in settings.validate():
            print(f"Warning: {problem}", file=sys.stderr)

        if args.save_config:
            settings.save(args.save_config)
            print(f"Settings saved to {args.save_config}", file=sys.stderr)

        sketch = Sketch(args.width, args.height, settings, args.seed)
        print(f"Growing crystal ({args.width}x{args.height}, seed={sketch.rng.get_seed()})...",
              file=sys.stderr)

        sketch.run(args.frames)

        stats = sketch.stats()
        print("Crystal grown!", file=sys.stderr)
        print(f"  Frames: {stats['frames']}", file=sys.stderr)
        print(f"  Accepted splits: {stats['accepted']}", file=sys.stderr)
        print(f"  Rejected splits: {stats['rejected']}", file=sys.stderr)
        print(f"  Polygons: {stats['polygons']}", file=sys.stderr)
        print(f"  Deepest generation: {stats['generation']}", file=sys.stderr)

        if args.clear:
            sketch.clear()
            sketch.draw_lines()

        sketch.export(args.output)
        print(f"Exported to {args.output}", file=sys.stderr)

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == '__main__':
    main()
