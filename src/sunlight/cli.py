from __future__ import annotations

import argparse
from datetime import date, datetime
import importlib
import inspect
import logging
import sys
from typing import Optional


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


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


def _fmt(dt: Optional[datetime], tz) -> str:
    if dt is None:
        return "--:--:--"
    if tz is not None:
        dt = dt.astimezone(tz)
    return dt.strftime("%Y-%m-%d %H:%M:%S %Z")


def cmd_times(argv: list[str]) -> int:
    from sunlight.core.types import Coordinates
    from sunlight.solar_date import SolarDate, TWILIGHT_ALTITUDES

    p = argparse.ArgumentParser(prog="sunlight times", description="Solar noon, sunrise, sunset and twilight for a location.")
    p.add_argument("--lat", type=float, required=True, help="Observer latitude in degrees (positive North)")
    p.add_argument("--lon", type=float, required=True, help="Observer longitude in degrees (positive East)")
    p.add_argument("--date", default=None, help="YYYY-MM-DD (default: today, UTC)")
    p.add_argument("--tz", default=None, help="IANA time zone for display, e.g. America/New_York (default: UTC)")
    p.add_argument("--twilight", choices=sorted(TWILIGHT_ALTITUDES), action="append", default=[], help="twilight kind (repeatable)")
    p.add_argument("--angle", type=float, action="append", default=[], help="extra solar altitude in degrees (repeatable)")
    args = p.parse_args(argv)

    tz = None
    if args.tz:
        from zoneinfo import ZoneInfo
        tz = ZoneInfo(args.tz)

    coords = Coordinates(latitude=args.lat, longitude=args.lon)
    day = _parse_ymd(args.date) if args.date else None
    sd = SolarDate.compute(coords, day)

    if sd is None:
        print("The Sun does not rise or set at this location on this date.")
        return 1

    print(f"Location: lat={coords.latitude:.6f} lon={coords.longitude:.6f}")
    print(f"Date    : {sd.date.isoformat()}")
    print()
    print(f"  Sunrise    : {_fmt(sd.sunrise, tz)}")
    print(f"  Solar noon : {_fmt(sd.solar_noon, tz)}")
    print(f"  Sunset     : {_fmt(sd.sunset, tz)}")

    for kind in args.twilight:
        pair = sd.twilight(kind)
        dawn, dusk = pair if pair is not None else (None, None)
        print()
        print(f"{kind.capitalize()} twilight ({TWILIGHT_ALTITUDES[kind].degrees:g} deg):")
        print(f"  Dawn       : {_fmt(dawn, tz)}")
        print(f"  Dusk       : {_fmt(dusk, tz)}")

    for angle in args.angle:
        print()
        print(f"Solar altitude {angle:g} deg:")
        print(f"  Before noon: {_fmt(sd.time_for_solar_angle(angle, after_transit=False), tz)}")
        print(f"  After noon : {_fmt(sd.time_for_solar_angle(angle, after_transit=True), tz)}")

    return 0


def cmd_position(argv: list[str]) -> int:
    from sunlight.reference import astro_args as aa
    from sunlight.reference import solar
    from sunlight.reference import time_scales as ts

    p = argparse.ArgumentParser(prog="sunlight position", description="Print the Sun's apparent position terms at a Julian Day.")
    p.add_argument("--jd", type=float, default=ts.J2000, help="Julian Day (default: J2000.0 = 2451545.0)")
    args = p.parse_args(argv)

    jd = float(args.jd)
    T = ts.julian_century(jd)

    L0 = aa.mean_solar_longitude(T)
    M = aa.mean_solar_anomaly(T)
    C = solar.solar_equation_of_the_center(T, M)
    lam = solar.apparent_solar_longitude(T, L0)
    eps0 = aa.mean_obliquity_of_the_ecliptic(T)
    eps = aa.apparent_obliquity_of_the_ecliptic(T, eps0)
    pos = solar.SolarPosition.from_julian_day(jd)

    print(f"JD = {jd:.6f}")
    print(f"T (Julian centuries from J2000.0) = {T:.12f}")
    print()
    print("Solar elements (degrees)")
    print(f"  L0     = {L0.degrees:.10f}")
    print(f"  M      = {M.degrees:.10f}")
    print(f"  C      = {C.degrees:.10f}")
    print(f"  lambda = {lam.degrees:.10f}")
    print()
    print("Obliquity (degrees)")
    print(f"  eps0   = {eps0.degrees:.10f}")
    print(f"  eps    = {eps.degrees:.10f}")
    print()
    print("Apparent position (degrees)")
    print(f"  Declination        = {pos.declination.degrees:.6f}")
    print(f"  Right ascension    = {pos.right_ascension.degrees:.6f}")
    print(f"  App. sidereal time = {pos.apparent_sidereal_time.degrees:.6f}")

    return 0


def cmd_julian(argv: list[str]) -> int:
    from sunlight.reference import time_scales as ts

    p = argparse.ArgumentParser(prog="sunlight julian", description="Gregorian date -> Julian Day and Julian century.")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--hours", type=float, default=0.0, help="Fractional hours after 0h UT")
    args = p.parse_args(argv)

    d = _parse_ymd(args.date)
    jd = ts.julian_day(d.year, d.month, d.day, hours=args.hours)
    print(f"JD = {jd:.8f}")
    print(f"T  = {ts.julian_century(jd):.12f}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="sunlight", description="Sunrise, sunset and solar position toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("times", help="Solar noon, sunrise, sunset and twilight for a location")
    sub.add_parser("position", help="Print the Sun's apparent position terms at a Julian Day")
    sub.add_parser("julian", help="Gregorian date -> Julian Day")

    # ephem diagnostics
    p_ephem = sub.add_parser("ephem", help="Ephemeris-based diagnostics")
    p_ephem.add_argument("tool", choices=["validate-ref"], help="Which ephemeris diagnostic to run")

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "times":
        return cmd_times(rest)

    if args.cmd == "position":
        return cmd_position(rest)

    if args.cmd == "julian":
        return cmd_julian(rest)

    if args.cmd == "ephem":
        tool_map = {
            "validate-ref": "sunlight.diagnostics.validate_reference",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
