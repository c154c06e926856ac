"""Textual in-process test harness for logdeck.

Re-exports all public API for convenient imports:
    from tests.harness import run_app, press_and_settle, current_panel, ...
"""

from tests.harness.app_runner import run_app
from tests.harness.interactions import press_and_settle, press_sequence
from tests.harness.assertions import current_panel, header_text, strip_text

__all__ = [
    "run_app",
    "press_and_settle",
    "press_sequence",
    "current_panel",
    "header_text",
    "strip_text",
]
