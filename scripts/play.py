#!/usr/bin/env python3
"""
Starfall - Play Script

Controls:
    Left/Right arrows: Move
    Space: Fire
    ESC: Back to menu

Usage:
    python scripts/play.py
    python scripts/play.py --config my_config.yaml --fps 30
    python scripts/play.py --mute --seed 42
"""
import sys
import os
import argparse
import warnings
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Suppress pygame messages
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'
warnings.filterwarnings('ignore', category=UserWarning, module='pygame')

from starfall.app import ShooterApp
from starfall.utils.config_loader import load_config


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Starfall - single-screen arcade shooter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/play.py                      # Play with config.yaml
  python scripts/play.py --fps 30             # Cap the frame rate
  python scripts/play.py --mute --seed 42     # Silent, reproducible enemy fire
"""
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        default=None,
        metavar="PATH",
        help="Path to config file (default: config.yaml)"
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=None,
        help="Frame rate cap (default: from config)"
    )
    parser.add_argument(
        "--mute",
        action="store_true",
        help="Start with sound effects and music off"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for enemy fire and the starfield"
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except ValueError as e:
        print(f"Error: Invalid configuration: {e}")
        sys.exit(1)

    if args.fps is not None:
        if args.fps <= 0:
            print("Error: --fps must be positive")
            sys.exit(1)
        config.visualization.render_fps = args.fps

    print("=" * 50)
    print("Starfall")
    print("=" * 50)
    print("Controls:")
    print("  Left/Right: Move")
    print("  Space: Fire")
    print("  ESC: Menu")
    print("=" * 50 + "\n")

    app = ShooterApp(config, seed=args.seed, mute=args.mute)
    score = app.run()
    print(f"\nLast score: {score}")


if __name__ == "__main__":
    main()
