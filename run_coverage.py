#!/usr/bin/env python3
"""
Coverage test runner for the minesweeper package
Runs the pytest suite under pytest-cov and optionally opens the HTML report
"""

import argparse
import subprocess
import sys
import webbrowser
from pathlib import Path


HTML_DIR = Path("htmlcov")


def run_coverage(html: bool, open_report: bool, extra_args) -> int:
    """Run tests with coverage and return the pytest exit code"""
    cmd = [
        sys.executable, "-m", "pytest",
        "tests/",
        "--cov=minesweeper",
        "--cov-report=term-missing",
    ]
    if html:
        cmd.append(f"--cov-report=html:{HTML_DIR}")
    cmd.extend(extra_args)

    print("Running:", " ".join(cmd))
    result = subprocess.run(cmd, check=False)

    if result.returncode == 0:
        print("\nAll tests passed")
    else:
        print(f"\nSome tests failed (exit code: {result.returncode})")

    report = HTML_DIR / "index.html"
    if html and report.exists():
        print(f"Coverage report: {report.absolute()}")
        if open_report:
            webbrowser.open(report.absolute().as_uri())

    return result.returncode


def main():
    parser = argparse.ArgumentParser(description="Run the test suite with coverage")
    parser.add_argument("--html", action="store_true", help="also write an HTML report")
    parser.add_argument("--open", action="store_true", dest="open_report",
                        help="open the HTML report in a browser (implies --html)")
    args, extra = parser.parse_known_args()

    sys.exit(run_coverage(args.html or args.open_report, args.open_report, extra))


if __name__ == "__main__":
    main()
