"""Console demo: validate the bundled samples in-process and print the outcome."""

import sys
from typing import List, Optional, TextIO

from shared_validators.demo.render import RenderedResult, render_result
from shared_validators.demo.samples import SAMPLES
from shared_validators.validators import validate_user


def run_sample(key: str) -> RenderedResult:
    """Validate one bundled sample. ``key`` is ``"valid"`` or ``"invalid"``."""
    label, payload = SAMPLES[key]
    return render_result(label, validate_user(payload))


def main(
    argv: Optional[List[str]] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Print each selected sample. Failures go to stderr; exit status 1 if any failed."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Validate the sample users with the shared User schema"
    )
    parser.add_argument(
        "--sample", "-s",
        choices=[*SAMPLES, "all"],
        default="all",
        help="Which sample to validate (default: all)"
    )
    args = parser.parse_args(argv)

    if stdout is None:
        stdout = sys.stdout
    if stderr is None:
        stderr = sys.stderr

    keys = list(SAMPLES) if args.sample == "all" else [args.sample]
    exit_code = 0
    for key in keys:
        rendered = run_sample(key)
        stream = stderr if rendered.is_error else stdout
        print(rendered.text + "\n", file=stream)
        if rendered.is_error:
            exit_code = 1
    return exit_code
