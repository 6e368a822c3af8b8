#!/usr/bin/env python3
"""CLI entry point for property-extractor"""

import sys
import argparse

from .main import run_transform


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(description="County property appraiser data extractor")
    parser.add_argument("--base-dir", type=str,
                        help="Working directory holding input.html, unnormalized_address.json and property_seed.json")
    parser.add_argument("--county", type=str,
                        help="County package to run (default: county_jurisdiction from unnormalized_address.json)")
    parser.add_argument("--strict-codes", choices=["county", "strict", "soft"], default=None,
                        help="Unknown property-use code policy; 'county' keeps each county's own policy")
    parser.add_argument("--extract-only", action="store_true",
                        help="Skip the owners/ producers and only run data_extractor")
    parser.add_argument("--output-zip", type=str,
                        help="Output ZIP filename (e.g., my_output.zip) for the data directory")
    return parser.parse_args(argv)


def strict_flag(mode):
    if mode == "strict":
        return True
    if mode == "soft":
        return False
    return None


def main(argv=None):
    """Main CLI entry point"""
    args = parse_arguments(argv)
    try:
        run_transform(
            base_dir=args.base_dir,
            county=args.county,
            strict=strict_flag(args.strict_codes),
            extract_only=args.extract_only,
            output_zip=args.output_zip,
        )
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
