#!/usr/bin/env python3
"""
Examples of using the congol CLI for different scenarios.
"""

import subprocess


def run_cli_command(args):
    """Run a CLI command and capture its output."""
    cmd = ["congol-cli"] + args
    print(f"Running: {' '.join(cmd)}")
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=30)
        print(result.stdout)
        if result.stderr:
            print(f"Stderr: {result.stderr}")
        print("-" * 50)
        return result.returncode == 0
    except subprocess.TimeoutExpired:
        print("Command timed out")
        return False


def main():
    """Run various CLI examples."""
    print("Conway's Game of Life CLI Examples")
    print("=" * 50)

    examples = [
        (["--list-patterns"], "List all available patterns"),
        (["--pattern", "Block", "-W", "8", "-H", "8", "-g", "3", "--delay", "0"], "Still life pattern (should not change)"),
        (["--pattern", "Blinker", "-W", "7", "-H", "7", "-g", "4", "--delay", "0"], "Oscillating blinker pattern"),
        (["--pattern", "Glider", "-W", "12", "-H", "12", "-g", "12", "--delay", "0", "--verbose"], "Glider crossing a bounded universe"),
        (["-W", "30", "-H", "15", "-p", "0.3", "--seed", "42", "-g", "10", "--delay", "0"], "Reproducible random population"),
        (["-W", "20", "-H", "10", "-g", "5", "--delay", "0", "--live", "#", "--dead", " "], "Custom glyphs"),
    ]

    success_count = 0
    for args, description in examples:
        print(f"\nExample: {description}")
        print("-" * len(f"Example: {description}"))
        if run_cli_command(args):
            success_count += 1
        else:
            print("Failed")

    print(f"\nSummary: {success_count}/{len(examples)} examples completed successfully")


if __name__ == "__main__":
    main()
