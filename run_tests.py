#!/usr/bin/env python
"""
Simple Test Runner for BinaryTreeLib
====================================

Runs all tests except slow ones.

Usage:
    python run_tests.py           # Run all non-slow tests
    python run_tests.py --all     # Run everything including slow tests
    python run_tests.py --cov     # Add a coverage report
"""

import subprocess
import sys
import argparse
from pathlib import Path


def run_tests(include_slow=False, coverage=False):
    """Run the test suite."""
    cmd = [
        sys.executable, "-m", "pytest",
        "tests",
        "--tb=short",               # Short traceback format
        "--durations=10",           # Show 10 slowest tests
        "-v"                        # Verbose output
    ]

    if coverage:
        cmd.extend(["--cov=binarytreelib", "--cov-report=term-missing"])

    if not include_slow:
        cmd.extend(["-m", "not slow"])
        print("Running all tests EXCEPT slow tests...")
    else:
        print("Running ALL tests including slow ones...")
    print("=" * 60)

    result = subprocess.run(cmd, cwd=Path(__file__).parent)
    return result.returncode


def main():
    parser = argparse.ArgumentParser(description="Test runner for BinaryTreeLib")
    parser.add_argument("--all", action="store_true", help="Run all tests including slow ones")
    parser.add_argument("--cov", action="store_true", help="Report coverage (needs pytest-cov)")

    args = parser.parse_args()
    return run_tests(include_slow=args.all, coverage=args.cov)


if __name__ == "__main__":
    sys.exit(main())
