"""Row-count limits per panel for a given output target.

// [LAW:single-enforcer] max_rows is the sole authority on how many rows a
//   panel renders. Renderers never clamp on their own.
"""

from __future__ import annotations

from dataclasses import dataclass

# Static output (terminal dashboard, static HTML, CSV/JSON).
MAX_CHOICES = 366
# Real-time HTML output.
MAX_CHOICES_RT = 50


@dataclass(frozen=True)
class OutputTargetFlags:
    """Output-target state consumed per query.

    configured_max: user row limit, <= 0 means unset.
    output_stdout: a report is written to standard output instead of the
        interactive terminal dashboard.
    real_time_html: real-time HTML streaming is active.
    output_formats: requested formats or output file names ("csv", "report.json").
    stdout_isatty: standard output is attached to a terminal device.
    """

    configured_max: int = 0
    output_stdout: bool = False
    real_time_html: bool = False
    output_formats: tuple[str, ...] = ()
    stdout_isatty: bool = True

    def requests_format(self, extension: str) -> bool:
        """True when ``extension`` was requested by name or as a file suffix."""
        suffix = "." + extension
        return any(
            fmt == extension or fmt.endswith(suffix)
            for fmt in self.output_formats
        )

    @property
    def uses_default_format(self) -> bool:
        return not self.output_formats


def max_rows(
    flags: OutputTargetFlags,
    standard_ceiling: int = MAX_CHOICES,
    real_time_ceiling: int = MAX_CHOICES_RT,
) -> int:
    """Maximum rows per panel. Rules are ordered; the first match wins."""
    configured = flags.configured_max

    if configured <= 0:
        return real_time_ceiling if flags.real_time_html else standard_ceiling

    # Terminal dashboard
    if not flags.output_stdout:
        return min(configured, standard_ceiling)

    if flags.real_time_html:
        return min(configured, real_time_ceiling)

    result = standard_ceiling
    if flags.requests_format("csv"):
        result = configured
    if flags.requests_format("json") and configured > 0:
        result = configured
    # HTML wins over CSV/JSON when several outputs were requested together.
    if (
        flags.requests_format("html")
        or flags.uses_default_format
        or not flags.stdout_isatty
    ):
        result = min(configured, standard_ceiling)
    return result
