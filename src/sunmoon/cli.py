from __future__ import annotations

import argparse
from datetime import datetime, timezone
import importlib
import inspect
import logging
import math
import sys

logger = logging.getLogger(__name__)


def _parse_when(s: str) -> datetime:
    """ISO 8601 date/time; naive values are read as UTC."""
    try:
        dt = datetime.fromisoformat(s)
    except ValueError as e:
        raise SystemExit(f"Invalid --date '{s}': expected ISO 8601, e.g. 2013-03-05T00:00") from e
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def _add_when(p: argparse.ArgumentParser) -> None:
    g = p.add_mutually_exclusive_group()
    g.add_argument("--ms", type=int, help="Unix time in milliseconds")
    g.add_argument("--date", help="ISO 8601 date/time (UTC if no offset given); default: now")


def _add_location(p: argparse.ArgumentParser) -> None:
    p.add_argument("--lat", type=float, required=True, help="Observer latitude in degrees")
    p.add_argument("--lon", type=float, required=True, help="Observer longitude in degrees (positive East)")


def _resolve_ms(args: argparse.Namespace) -> int:
    from sunmoon.core.time import datetime_to_ms

    if args.ms is not None:
        ms = args.ms
    elif args.date is not None:
        ms = datetime_to_ms(_parse_when(args.date))
    else:
        ms = datetime_to_ms(datetime.now(timezone.utc))
    logger.debug("resolved instant: %d ms", ms)
    return ms


def _fmt_ms(ms: int | float) -> str:
    from sunmoon.core.time import ms_to_datetime

    if not math.isfinite(ms):
        return "does not occur"
    return f"{ms_to_datetime(int(ms)).isoformat()}  ({int(ms)} ms)"


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_sun(argv: list[str]) -> int:
    import sunmoon

    p = argparse.ArgumentParser(prog="sunmoon sun", description="Sun azimuth and altitude for an observer.")
    _add_location(p)
    _add_when(p)
    args = p.parse_args(argv)

    ms = _resolve_ms(args)
    pos = sunmoon.sun_position(ms, args.lat, args.lon)

    print(f"Time: {_fmt_ms(ms)}")
    print("Sun Position:")
    print(f"  Azimuth  = {pos.azimuth:.10f} rad ({math.degrees(pos.azimuth):.4f} deg)")
    print(f"  Altitude = {pos.altitude:.10f} rad ({math.degrees(pos.altitude):.4f} deg)")
    return 0


def cmd_moon(argv: list[str]) -> int:
    import sunmoon

    p = argparse.ArgumentParser(prog="sunmoon moon", description="Moon azimuth, altitude, distance and parallactic angle.")
    _add_location(p)
    _add_when(p)
    args = p.parse_args(argv)

    ms = _resolve_ms(args)
    pos = sunmoon.moon_position(ms, args.lat, args.lon)

    print(f"Time: {_fmt_ms(ms)}")
    print("Moon Position:")
    print(f"  Azimuth           = {pos.azimuth:.10f} rad ({math.degrees(pos.azimuth):.4f} deg)")
    print(f"  Altitude          = {pos.altitude:.10f} rad ({math.degrees(pos.altitude):.4f} deg)")
    print(f"  Distance          = {pos.distance_km:.1f} km")
    print(f"  Parallactic angle = {pos.parallactic_angle:.10f} rad")
    return 0


def cmd_illum(argv: list[str]) -> int:
    import sunmoon

    p = argparse.ArgumentParser(prog="sunmoon illum", description="Moon illuminated fraction, phase and bright-limb angle.")
    _add_when(p)
    args = p.parse_args(argv)

    ms = _resolve_ms(args)
    ill = sunmoon.moon_illumination(ms)

    print(f"Time: {_fmt_ms(ms)}")
    print("Moon Illumination:")
    print(f"  Fraction = {ill.fraction:.6f}")
    print(f"  Phase    = {ill.phase:.6f}  (0 new, 0.5 full)")
    print(f"  Angle    = {ill.angle:.10f} rad")
    return 0


def cmd_times(argv: list[str]) -> int:
    import sunmoon

    p = argparse.ArgumentParser(prog="sunmoon times", description="Sun phase times (sunrise, dusk, golden hour, ...) for a day.")
    _add_location(p)
    _add_when(p)
    p.add_argument("--height", type=float, default=0.0, help="Observer height above the horizon in metres")
    p.add_argument("--phase", default=None, help=f"Only this phase (one of: {', '.join(sunmoon.list_times())})")
    args = p.parse_args(argv)

    ms = _resolve_ms(args)
    print(f"Time: {_fmt_ms(ms)}")

    if args.phase is not None:
        try:
            t = sunmoon.time_at(ms, args.phase, args.lat, args.lon, args.height)
        except sunmoon.UnknownPhaseError as e:
            raise SystemExit(str(e)) from e
        print(f"  {args.phase:<16}: {_fmt_ms(t)}")
        return 0

    times = sunmoon.sun_times(ms, args.lat, args.lon, args.height)
    for name, t in sorted(times.items(), key=lambda kv: kv[1] if math.isfinite(kv[1]) else math.inf):
        print(f"  {name:<16}: {_fmt_ms(t)}")
    return 0


def cmd_moon_times(argv: list[str]) -> int:
    import sunmoon

    p = argparse.ArgumentParser(prog="sunmoon moon-times", description="Moonrise and moonset for the UTC day.")
    _add_location(p)
    _add_when(p)
    args = p.parse_args(argv)

    ms = _resolve_ms(args)
    mt = sunmoon.moon_times(ms, args.lat, args.lon)

    print(f"Time: {_fmt_ms(ms)}")
    if mt.always_up:
        print("  Moon stays above the horizon all day.")
    elif mt.always_down:
        print("  Moon stays below the horizon all day.")
    else:
        print(f"  Moonrise: {_fmt_ms(mt.rise) if mt.rise is not None else '-'}")
        print(f"  Moonset : {_fmt_ms(mt.set) if mt.set is not None else '-'}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="sunmoon", description="Sun and Moon positions, phases and rise/set times.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("sun", help="Sun azimuth and altitude")
    sub.add_parser("moon", help="Moon azimuth, altitude and distance")
    sub.add_parser("illum", help="Moon illumination")
    sub.add_parser("times", help="Sun phase times for a day")
    sub.add_parser("moon-times", help="Moonrise and moonset")

    # diagnostics
    sub.add_parser("plot-day", help="Plot Sun/Moon altitude over a day (needs sunmoon[diagnostics])")

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "sun":
        return cmd_sun(rest)

    if args.cmd == "moon":
        return cmd_moon(rest)

    if args.cmd == "illum":
        return cmd_illum(rest)

    if args.cmd == "times":
        return cmd_times(rest)

    if args.cmd == "moon-times":
        return cmd_moon_times(rest)

    if args.cmd == "plot-day":
        return _run_module_main("sunmoon.diagnostics.day_curve", rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
