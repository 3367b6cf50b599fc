#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
from datetime import datetime, timezone
from typing import List, Optional

import sunmoon
from sunmoon.core.time import MILLISECONDS_PER_DAY, datetime_to_ms, start_of_utc_day


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "sunmoon[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "sunmoon[diagnostics]"') from e


def altitude_curves(day_ms: int, lat: float, lon: float, step_minutes: float):
    """Sample hours since UTC midnight and Sun/Moon altitudes (degrees) over one day."""
    np = _need_numpy()

    t0 = start_of_utc_day(day_ms)
    hours = np.arange(0.0, 24.0 + 1e-9, step_minutes / 60.0, dtype=float)
    stamps = [t0 + int(round(h * 3_600_000)) for h in hours]

    sun_alt = np.array([math.degrees(sunmoon.sun_position(t, lat, lon).altitude) for t in stamps], dtype=float)
    moon_alt = np.array([math.degrees(sunmoon.moon_position(t, lat, lon).altitude) for t in stamps], dtype=float)
    return hours, sun_alt, moon_alt


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Plot Sun and Moon altitude over one UTC day, with the sun phase times marked.")
    p.add_argument("--date", default=None, help="YYYY-MM-DD (UTC); default: today")
    p.add_argument("--lat", type=float, default=50.5)
    p.add_argument("--lon", type=float, default=30.5)
    p.add_argument("--height", type=float, default=0.0, help="observer height in metres")
    p.add_argument("--step", type=float, default=10.0, help="sampling step in minutes")
    p.add_argument("--out", default="day_curve.png", help="output image filename")
    args = p.parse_args(argv)

    if args.step <= 0:
        raise SystemExit("--step must be > 0")

    if args.date is None:
        dt = datetime.now(timezone.utc)
    else:
        dt = datetime.fromisoformat(args.date).replace(tzinfo=timezone.utc)
    t0 = start_of_utc_day(datetime_to_ms(dt))

    plt = _need_matplotlib()

    hours, sun_alt, moon_alt = altitude_curves(t0, args.lat, args.lon, args.step)

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(hours, sun_alt, linewidth=2, color="orange", label="Sun")
    ax.plot(hours, moon_alt, linewidth=1.5, color="slategray", label="Moon (refracted)")
    ax.axhline(0.0, color="black", linewidth=0.8)

    # phase times of the day nearest to local noon
    noon_guess = t0 + MILLISECONDS_PER_DAY // 2 - int(args.lon / 15.0 * 3_600_000)
    times = sunmoon.sun_times(noon_guess, args.lat, args.lon, args.height)
    for name, t in times.items():
        if not math.isfinite(t):
            continue
        h = (t - t0) / 3_600_000
        if 0.0 <= h <= 24.0:
            ax.axvline(h, linestyle=":", linewidth=0.8, alpha=0.6)
            ax.text(h, ax.get_ylim()[1], name, rotation=90, fontsize=7, va="top")

    ill = sunmoon.moon_illumination(t0 + MILLISECONDS_PER_DAY // 2)
    ax.set_title(
        f"Altitude at lat={args.lat:g}, lon={args.lon:g} on {dt.date().isoformat()} UTC "
        f"(Moon {100.0 * ill.fraction:.0f}% lit)"
    )
    ax.set_xlabel("Hours since 00:00 UTC")
    ax.set_ylabel("Altitude (deg)")
    ax.set_xlim(0.0, 24.0)
    ax.grid(True, alpha=0.3)
    ax.legend()
    fig.tight_layout()
    fig.savefig(args.out, dpi=150)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
