"""
Central configuration for gctk tunables and shared constants.
"""

import logging
import os

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")
# Add Logger.trace if missing
if not hasattr(logging.Logger, "trace"):

    def _trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    logging.Logger.trace = _trace  # type: ignore[attr-defined]
    logging.TRACE = TRACE  # type: ignore[attr-defined]

TRACE_ENABLED = str(os.getenv("GCTK_TRACE", "0")).lower() in ("1", "true", "yes", "on")

logger = logging.getLogger(__name__)

# Logs go to stderr; stdout carries program output only
LOG_LEVEL_DEFAULT: str = os.getenv("GCTK_LOG_LEVEL", "WARNING").strip().upper()
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT: str = "%H:%M:%S"


def _parse_number_digits() -> int:
    raw = os.getenv("GCTK_NUMBER_DIGITS")
    if not raw:
        return 10
    try:
        digits = int(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid GCTK_NUMBER_DIGITS={raw!r}")
        return 10
    return max(1, digits)


# Significant digits used when rendering argument values back to text
NUMBER_FORMAT_DIGITS: int = _parse_number_digits()

# Axis letters in Position vector order
AXES: tuple[str, ...] = ("X", "Y", "Z")
