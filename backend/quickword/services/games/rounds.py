import time
from typing import Dict, NamedTuple, Optional

MS_PER_MINUTE = 60 * 1000
# A round accepts answers for this long after it starts
ANSWER_WINDOW_MS = 2 * MS_PER_MINUTE

# interval (min) -> offset (ms): hourly rounds at :00, half-hourly at :05 and :35
DEFAULT_SCHEDULE: Dict[int, int] = {
    60: 0,
    30: 5 * MS_PER_MINUTE,
}
FALLBACK_SCHEDULE: Dict[int, int] = {30: 0}


class RoundWindow(NamedTuple):
    interval_minutes: int
    start_ms: int
    end_ms: int
    active: bool

    def to_dict(self) -> dict:
        return {
            'interval_min': self.interval_minutes,
            'round_start_ms': self.start_ms,
            'answer_deadline_ms': self.end_ms,
            'active': self.active,
        }


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def _interval_ms(interval_minutes: int) -> int:
    if interval_minutes <= 0:
        raise ValueError(f"interval must be positive, got {interval_minutes}")
    return interval_minutes * MS_PER_MINUTE


def floor_to_interval_start_ms(now: int, interval_minutes: int, offset_ms: int = 0) -> int:
    """Start of the round containing `now` (integer floor, also for negative times)."""
    step = _interval_ms(interval_minutes)
    return ((now - offset_ms) // step) * step + offset_ms


def next_drop_ms(now: int, interval_minutes: int, offset_ms: int = 0) -> int:
    """Start of the next round; `now` itself when it sits on a boundary."""
    step = _interval_ms(interval_minutes)
    return -((offset_ms - now) // step) * step + offset_ms


def parse_round_schedule(raw: Optional[str]) -> Dict[int, int]:
    """Parse "60:0,30:5" (interval:offset, minutes) into {interval: offset_ms}.

    A bare interval ("30") means no offset. An empty value falls back to
    30-minute rounds.
    """
    schedule: Dict[int, int] = {}
    for part in (raw or '').split(','):
        part = part.strip()
        if not part:
            continue
        interval_s, _, offset_s = part.partition(':')
        try:
            interval = int(interval_s)
            offset = int(offset_s) if offset_s.strip() else 0
        except ValueError:
            raise ValueError(f"invalid round schedule entry {part!r}") from None
        if interval <= 0:
            raise ValueError(f"round interval must be positive in {part!r}")
        if offset < 0 or offset >= interval:
            raise ValueError(f"round offset must be within the interval in {part!r}")
        schedule[interval] = offset * MS_PER_MINUTE
    return schedule or dict(FALLBACK_SCHEDULE)


def active_window(now: int, schedule: Dict[int, int] = DEFAULT_SCHEDULE,
                  answer_window_ms: int = ANSWER_WINDOW_MS) -> Optional[RoundWindow]:
    """The answerable round at `now`, preferring the one that closes first."""
    best: Optional[RoundWindow] = None
    for interval, offset in (schedule or FALLBACK_SCHEDULE).items():
        start = floor_to_interval_start_ms(now, interval, offset)
        end = start + answer_window_ms
        if not (start <= now < end):
            continue
        if best is None or end < best.end_ms:
            best = RoundWindow(interval, start, end, True)
    return best


def next_drop(now: int, schedule: Dict[int, int] = DEFAULT_SCHEDULE,
              answer_window_ms: int = ANSWER_WINDOW_MS) -> RoundWindow:
    """Earliest upcoming round start across the schedule."""
    best: Optional[RoundWindow] = None
    for interval, offset in (schedule or FALLBACK_SCHEDULE).items():
        drop = next_drop_ms(now, interval, offset)
        if best is None or drop < best.start_ms:
            best = RoundWindow(interval, drop, drop + answer_window_ms, False)
    return best


def current_round(now: int, schedule: Dict[int, int] = DEFAULT_SCHEDULE,
                  answer_window_ms: int = ANSWER_WINDOW_MS) -> RoundWindow:
    """The live round if one is answerable, otherwise the next one to drop.

    Between windows this keeps returning the upcoming round, so callers get
    a stable round key to render against.
    """
    window = active_window(now, schedule, answer_window_ms)
    if window is not None:
        return window
    return next_drop(now, schedule, answer_window_ms)
