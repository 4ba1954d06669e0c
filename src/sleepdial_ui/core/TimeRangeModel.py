"""
TimeRangeModel holds the two knob angles of a circular time slider and
derives everything the renderer shows from them:
* Start and end time of day, formatted as "HH:MM"
* Duration between them, wrapping past midnight
* Fraction of the ring covered by the connector arc

Mutators are called on drag events, queries are polled on every redraw.
Observers get notified after every mutation, duration observers only when
the formatted duration text changes.
"""
from datetime import date, datetime, time, timedelta
import logging
from typing import Callable, List, Optional

from sleepdial_helper import clockwise_distance, normalize_angle

from sleepdial_ui.core.SliderConfig import SliderConfig
from sleepdial_ui.core.clock import (
  DEGREES_PER_DAY,
  angle_for_clock_time,
  format_clock_time,
  format_duration,
  hours_for_angle,
  split_hours,
  wrapped_duration,
)


class TimeRangeModel:
    DEFAULT_START_ANGLE = 0.0
    DEFAULT_END_ANGLE = 90.0

    def __init__(
        self,
        config: Optional[SliderConfig] = None,
        start_angle: float = DEFAULT_START_ANGLE,
        end_angle: float = DEFAULT_END_ANGLE,
        selected_date: Optional[date] = None
    ) -> None:
        self.config = config or SliderConfig()
        self.selected_date = selected_date or date.today()

        self._start_angle = normalize_angle(start_angle)
        self._end_angle = normalize_angle(end_angle)

        self._observers: List[Callable[['TimeRangeModel'], None]] = []
        self._duration_observers: List[Callable[[str], None]] = []
        self._last_duration = self.formatted_duration()

    @property
    def start_angle(self) -> float:
        return self._start_angle

    @property
    def end_angle(self) -> float:
        return self._end_angle

    @property
    def start_time(self) -> str:
        return self.formatted_clock_time(self._start_angle)

    @property
    def end_time(self) -> str:
        return self.formatted_clock_time(self._end_angle)

    def add_observer(self, callback: Callable[['TimeRangeModel'], None]) -> None:
        self._observers.append(callback)

    def remove_observer(self, callback: Callable[['TimeRangeModel'], None]) -> None:
        if callback in self._observers:
            self._observers.remove(callback)

    def add_duration_observer(self, callback: Callable[[str], None]) -> None:
        self._duration_observers.append(callback)

    def set_start_angle(self, angle: float) -> None:
        self._start_angle = normalize_angle(angle)
        self._notify()

    def set_end_angle(self, angle: float) -> None:
        self._end_angle = normalize_angle(angle)
        self._notify()

    def set_start_angle_guarded(
        self,
        angle: float,
        min_separation_degrees: Optional[float] = None
    ) -> None:
        """
        Move the start knob unless that would bring it closer than the
        minimum separation to the end knob, measured around the ring in either
        direction. In that case the start stays put and the end knob is pushed
        ahead of it instead.
        """
        min_separation = self._min_separation(min_separation_degrees)

        if self._keeps_separation(angle, self._end_angle, min_separation):
            self._start_angle = normalize_angle(angle)
        else:
            logging.debug(f"Start at {angle:.1f} too close to end, pushing end")
            self._end_angle = normalize_angle(self._start_angle + min_separation)

        self._notify()

    def set_end_angle_guarded(
        self,
        angle: float,
        min_separation_degrees: Optional[float] = None
    ) -> None:
        """Mirror of set_start_angle_guarded, the start knob gets pushed back."""
        min_separation = self._min_separation(min_separation_degrees)

        if self._keeps_separation(self._start_angle, angle, min_separation):
            self._end_angle = normalize_angle(angle)
        else:
            logging.debug(f"End at {angle:.1f} too close to start, pushing start")
            self._start_angle = normalize_angle(self._end_angle - min_separation)

        self._notify()

    def rotate_both_by(self, delta: float) -> None:
        self._start_angle = normalize_angle(self._start_angle + delta)
        self._end_angle = normalize_angle(self._end_angle + delta)
        self._notify()

    def set_start_time(self, text: str) -> None:
        """Raises MalformedTimeString if text is not a valid "HH:MM" time."""
        self.set_start_angle(angle_for_clock_time(text))

    def set_end_time(self, text: str) -> None:
        """Raises MalformedTimeString if text is not a valid "HH:MM" time."""
        self.set_end_angle(angle_for_clock_time(text))

    def connector_fraction(self) -> float:
        start = self._start_angle
        end = self._end_angle
        if start > end:
            return (DEGREES_PER_DAY - start + end) / DEGREES_PER_DAY

        return (end - start) / DEGREES_PER_DAY

    def duration_hours(self) -> float:
        start = hours_for_angle(self._start_angle)
        end = hours_for_angle(self._end_angle)

        return wrapped_duration(start, end)

    def formatted_duration(self) -> str:
        return format_duration(self.duration_hours())

    def formatted_clock_time(self, angle: float) -> str:
        return format_clock_time(angle)

    def start_datetime(self) -> datetime:
        return self._datetime_for_angle(self._start_angle)

    def end_datetime(self) -> datetime:
        end = self._datetime_for_angle(self._end_angle)
        if self._start_angle > self._end_angle:
            end += timedelta(days=1)

        return end

    def _datetime_for_angle(self, angle: float) -> datetime:
        hours, minutes = split_hours(hours_for_angle(angle))

        return datetime.combine(self.selected_date, time(hours, minutes))

    def _min_separation(self, min_separation_degrees: Optional[float]) -> float:
        if min_separation_degrees is None:
            return self.config.min_separation_degrees

        return min_separation_degrees

    def _keeps_separation(self, start: float, end: float, min_separation: float) -> bool:
        # The arc may cross midnight but neither knob may pass the other
        span = clockwise_distance(start, end)

        return min_separation <= span <= DEGREES_PER_DAY - min_separation

    def _notify(self) -> None:
        for callback in list(self._observers):
            callback(self)

        duration = self.formatted_duration()
        if duration != self._last_duration:
            self._last_duration = duration
            for callback in list(self._duration_observers):
                callback(duration)
