import math

CONFIG = {
    "CELL_SIZE": 100,
    "FPS": 60,
    "TURN_TIME_LIMIT": 10.0,
    "GRAVITY": 1600.0,
    "POPUP_FADE_SPEED": 600.0,
    "MAX_DT": 0.25,
    "RNG_SEED": None,
    "LOG_LEVEL": "INFO",
}


def sanitize_dt(dt) -> float:
    """Frame time guard: NaN/inf/negative -> 0, long stalls clamp to MAX_DT."""
    try:
        dt = float(dt)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(dt) or dt < 0:
        return 0.0
    return min(dt, float(CONFIG["MAX_DT"]))
