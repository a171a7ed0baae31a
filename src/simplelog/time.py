import threading
from datetime import datetime


def datetime_now() -> datetime:
    """
    Get the current local wall-clock time.

    Returns
    -------
    datetime
        The current local time, naive.
    """
    return datetime.now()


class DateTracker:
    """
    Renders timestamps whose precision depends on the last stamped date.

    The first line of a new month carries the month and day, the first
    line of a new day carries the day, and every other line carries
    millisecond precision.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self.last_month = 0
        self.last_day = 0

    def stamp(self, now: datetime) -> str:
        """
        Render the timestamp for `now` and record its month and day.

        Parameters
        ----------
        now : datetime
            The wall-clock reading to render.

        Returns
        -------
        str
            One of '[HH:MM-|MM/DD]', '[HH:MM:SS-|DD]' or '[HH:MM:SS.mmm]'.

        Example
        -------
        >>> tracker = DateTracker()
        >>> tracker.stamp(datetime(2024, 3, 9, 14, 5, 7, 250000))
        '[14:05-|03/09]'
        >>> tracker.stamp(datetime(2024, 3, 9, 14, 5, 8, 4000))
        '[14:05:08.004]'
        """
        with self._lock:
            if now.month != self.last_month:
                text = now.strftime("[%H:%M-|%m/%d]")
            elif now.day != self.last_day:
                text = now.strftime("[%H:%M:%S-|%d]")
            else:
                text = now.strftime("[%H:%M:%S.") + f"{now.microsecond // 1000:03d}]"
            self.last_month, self.last_day = now.month, now.day
        return text

    def reset(self) -> None:
        """Forget the last stamped date."""
        with self._lock:
            self.last_month = 0
            self.last_day = 0
