"""
Frame pacing.
"""

import time


def delay(seconds: float) -> None:
    """
    Pause for a fixed duration.

    If the sleep is interrupted it is restarted with the full duration
    rather than the remaining time.

    Args:
        seconds: Time to pause
    """
    while True:
        try:
            time.sleep(seconds)
            return
        except InterruptedError:
            continue
