"""Human-readable sizes, durations and percentages."""

_BYTES_IN_KB = 1024
_SIZES = ("B", "KB", "MB", "GB")
_MS_IN_SECOND = 1000
_MS_IN_MINUTE = 60_000


def format_bytes(num_bytes: int) -> str:
    if num_bytes == 0:
        return "0 B"
    sign = "-" if num_bytes < 0 else ""
    value = float(abs(num_bytes))
    unit = 0
    while value >= _BYTES_IN_KB and unit < len(_SIZES) - 1:
        value /= _BYTES_IN_KB
        unit += 1
    return f"{sign}{round(value, 2):g} {_SIZES[unit]}"


def format_duration(ms: float) -> str:
    if ms < _MS_IN_SECOND:
        return f"{ms:.0f}ms"
    if ms < _MS_IN_MINUTE:
        return f"{ms / _MS_IN_SECOND:.2f}s"
    minutes = int(ms // _MS_IN_MINUTE)
    seconds = (ms % _MS_IN_MINUTE) / _MS_IN_SECOND
    return f"{minutes}m {seconds:.0f}s"


def format_percent(value: float, total: float) -> str:
    if total == 0:
        return "0%"
    return f"{value / total * 100:.1f}%"
