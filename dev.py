"""Development script to run checks (formatting, linting, tests) and a sample scan."""

import argparse
import subprocess
import sys


def run_command(command: list[str], step_name: str) -> None:
    """Run a shell command as a step in the development process."""
    print(f"\n--- Running Step: {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError:
        print(f"\n❌ Failed: {step_name}")
        sys.exit(1)


def main() -> None:
    """Run the development checks and optionally a scan of the test fixtures."""
    parser = argparse.ArgumentParser(
        description="Run development checks and a sample scan."
    )
    parser.add_argument(
        "--ci", action="store_true", help="Run checks and tests only, without fixes"
    )
    args = parser.parse_args()

    if args.ci:
        run_command(["uv", "run", "ruff", "format", "--check"], "Ruff Format Check")
        run_command(["uv", "run", "ruff", "check"], "Ruff Linting")
        run_command(["uv", "run", "pytest"], "Tests")
        print("\n✅ CI checks passed successfully.")
        return

    # Run auto-formatting and fixing
    run_command(["uv", "run", "ruff", "format"], "Ruff Formatting")
    run_command(["uv", "run", "ruff", "check", "--fix"], "Ruff Linting & Fixes")
    run_command(["uv", "run", "pytest"], "Tests")

    run_command(
        [
            "uv",
            "run",
            "super-toolbelt",
            "--no-cache",
            "scan",
            "tests/fixtures",
        ],
        "Sample Scan",
    )

    print("\n✅ All development checks and the sample scan passed successfully.")


if __name__ == "__main__":
    main()
