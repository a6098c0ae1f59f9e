from __future__ import annotations


def format_time(num_secs: int) -> str:
    """format a whole number of seconds as `[h:]mm:ss`"""
    minutes, seconds = divmod(num_secs, 60)
    hours, minutes = divmod(minutes, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{seconds:02d}"

    return f"{minutes:02d}:{seconds:02d}"
