"""Demo UI - two fixed samples validated in-process, rendered as text."""

from shared_validators.demo.console import main, run_sample
from shared_validators.demo.render import RenderedResult, render_result
from shared_validators.demo.samples import INVALID_USER, SAMPLES, VALID_USER

__all__ = [
    "INVALID_USER",
    "SAMPLES",
    "VALID_USER",
    "RenderedResult",
    "main",
    "render_result",
    "run_sample",
]
