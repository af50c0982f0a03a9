#!/usr/bin/env python3
"""
Command-line interface for responsive srcset generation.
"""

import argparse
import json
import sys

from dotenv import load_dotenv

from responsive_srcset.config import DeliveryConfig
from responsive_srcset.models import BreakpointSet, TagOptions
from responsive_srcset.tags import image_attributes

# Load environment variables
load_dotenv()


def build_breakpoints(args) -> BreakpointSet:
    """Build a breakpoint set from either --widths or --min/--max/--count."""
    if args.widths:
        return BreakpointSet.from_widths(args.widths)

    if args.min is None or args.max is None or args.count is None:
        raise ValueError("Provide --widths or all of --min, --max and --count")

    return BreakpointSet.from_range(args.min, args.max, args.count)


def cmd_breakpoints(args):
    """Print the widths of a breakpoint set."""
    breakpoints = build_breakpoints(args)

    if breakpoints.is_empty():
        print("⚠️  No breakpoints")
        return 1

    print(" ".join(str(width) for width in breakpoints.widths))
    return 0


def cmd_srcset(args):
    """Generate srcset (and optionally sizes) for a source image."""
    breakpoints = build_breakpoints(args).with_sizes(args.sizes)

    config = DeliveryConfig.from_env(cloud_name=args.cloud_name)
    url = config.to_url(transformation=args.transformation)

    if args.json:
        attributes = image_attributes(
            args.source,
            url,
            TagOptions(srcset=breakpoints)
        )
        print(json.dumps(attributes, indent=2))
        return 0 if "srcset" in attributes else 1

    result = breakpoints.generate_srcset(args.source, url)
    if result is None:
        print("⚠️  No breakpoints, srcset omitted")
        return 1

    print(f"srcset: {result.srcset}")
    print(f"src: {result.largest_url}")
    if breakpoints.has_sizes():
        print(f"sizes: {breakpoints.generate_sizes()}")

    return 0


def cmd_sizes(args):
    """Print the sizes attribute for a breakpoint set."""
    breakpoints = build_breakpoints(args)

    if breakpoints.is_empty():
        print("⚠️  No breakpoints")
        return 1

    print(breakpoints.generate_sizes())
    return 0


def add_breakpoint_arguments(parser):
    parser.add_argument("--widths", "-w", type=int, nargs="+", help="Explicit breakpoint widths")
    parser.add_argument("--min", type=int, help="Smallest width (px)")
    parser.add_argument("--max", type=int, help="Largest width (px)")
    parser.add_argument("--count", "-n", type=int, help="Number of breakpoints")


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Responsive image srcset generation",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Breakpoints command
    bp_parser = subparsers.add_parser("breakpoints", help="Compute breakpoint widths")
    add_breakpoint_arguments(bp_parser)

    # Srcset command
    srcset_parser = subparsers.add_parser("srcset", help="Generate srcset for an image")
    srcset_parser.add_argument("source", help="Public identifier of the image")
    add_breakpoint_arguments(srcset_parser)
    srcset_parser.add_argument("--sizes", action="store_true", help="Also generate a sizes attribute")
    srcset_parser.add_argument("--cloud-name", "-c", help="CDN cloud name (default: SRCSET_CLOUD_NAME)")
    srcset_parser.add_argument("--transformation", "-t", help="Base transformation applied before scaling")
    srcset_parser.add_argument("--json", action="store_true", help="Print image attributes as JSON")

    # Sizes command
    sizes_parser = subparsers.add_parser("sizes", help="Generate a sizes attribute")
    add_breakpoint_arguments(sizes_parser)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == "breakpoints":
            return cmd_breakpoints(args)
        elif args.command == "srcset":
            return cmd_srcset(args)
        elif args.command == "sizes":
            return cmd_sizes(args)
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user")
        return 130
    except Exception as e:
        print(f"\n❌ Error: {str(e)}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
