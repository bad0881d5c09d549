"""Sliding window search over viewer counts."""

from collections.abc import Sequence

WINDOW_DIVISOR = 5


def peak_window_start(viewers: Sequence[int], divisor: int = WINDOW_DIVISOR) -> int:
    """Locate the busiest ``1/divisor`` slice of a broadcast.

    Windows of ``len(viewers) // divisor`` consecutive samples are scanned
    from the left, stopping one window short of the end. The first window
    with the strictly highest sum wins. The result is the window position
    expressed as ``int((index + 1) / len(viewers) * 100)``.

    With fewer than ``divisor`` samples no window is scanned and the result
    falls back to index 0, i.e. ``int(100 / len(viewers))``.
    """
    count = len(viewers)
    if count == 0:
        raise ValueError("viewers must not be empty")

    step = count // divisor
    best_sum = 0
    best_index = 0
    if step > 0:
        window_sum = sum(viewers[:step])
        for i in range(count - step):
            if i > 0:
                window_sum += viewers[i + step - 1] - viewers[i - 1]
            if window_sum > best_sum:
                best_sum = window_sum
                best_index = i
    return int(((best_index + 1) / count) * 100)
