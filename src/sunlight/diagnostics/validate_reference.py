#!/usr/bin/env python3
from __future__ import annotations

import argparse
from datetime import date, timedelta
from typing import List, Optional

from sunlight.core.types import Coordinates
from sunlight.ephemeris import load_ephemeris
from sunlight.reference import time_scales as ts
from sunlight.reference.solar import SolarPosition
from sunlight.solar_date import SolarDate


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "sunlight[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "sunlight[diagnostics]"') from e


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _nearest_residual_seconds(np, ours_jd, ref_jd) -> "np.ndarray":
    """Signed (ours - nearest reference) in seconds; NaN where ours is NaN."""
    ref_jd = np.sort(ref_jd)
    idx = np.clip(np.searchsorted(ref_jd, ours_jd), 1, len(ref_jd) - 1)
    left = ref_jd[idx - 1]
    right = ref_jd[idx]
    nearest = np.where(np.abs(ours_jd - left) <= np.abs(ours_jd - right), left, right)
    return (ours_jd - nearest) * 86400.0


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate analytical solar position and rise/set times against skyfield.")
    p.add_argument("--lat", type=float, default=35.783)
    p.add_argument("--lon", type=float, default=-78.65, help="Observer longitude in degrees (positive East)")
    p.add_argument("--start", default="2015-01-01", help="YYYY-MM-DD")
    p.add_argument("--days", type=int, default=365)
    p.add_argument("--kernel-dir", default=".", help="Directory holding (or receiving) de421.bsp")
    p.add_argument("--out-png", default="reference_validation.png")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()
    from skyfield import almanac
    from skyfield.api import wgs84

    print("Loading DE421 ephemeris...")
    timescale, eph = load_ephemeris(args.kernel_dir)
    earth, sun = eph["earth"], eph["sun"]

    coords = Coordinates(latitude=args.lat, longitude=args.lon)
    days = [_parse_ymd(args.start) + timedelta(days=i) for i in range(args.days)]

    # 1. Analytical model
    jds = np.array([ts.julian_day(d.year, d.month, d.day) for d in days])
    our_ra = []
    our_dec = []
    our_rise = []
    our_set = []
    for d, jd in zip(days, jds):
        pos = SolarPosition.from_julian_day(float(jd))
        our_ra.append(pos.right_ascension.degrees)
        our_dec.append(pos.declination.degrees)

        sd = SolarDate.compute(coords, d)
        if sd is None:
            our_rise.append(np.nan)
            our_set.append(np.nan)
        else:
            our_rise.append(jd + sd.sunrise_hours / 24.0)
            our_set.append(jd + sd.sunset_hours / 24.0)

    # 2. Skyfield apparent place (true equator and equinox of date)
    t = timescale.ut1_jd(jds)
    ra, dec, _ = earth.at(t).observe(sun).apparent().radec(epoch="date")
    d_ra = ((np.array(our_ra) - ra.hours * 15.0 + 180.0) % 360.0 - 180.0) * 3600.0
    d_dec = (np.array(our_dec) - dec.degrees) * 3600.0

    # 3. Skyfield rise/set events over the whole window (+/- 1 day margin)
    t0 = timescale.ut1_jd(jds[0] - 1.0)
    t1 = timescale.ut1_jd(jds[-1] + 2.0)
    f = almanac.sunrise_sunset(eph, wgs84.latlon(args.lat, args.lon))
    times, events = almanac.find_discrete(t0, t1, f)
    ref_rise = times.ut1[events == 1]
    ref_set = times.ut1[events == 0]

    if len(ref_rise) < 2 or len(ref_set) < 2:
        print("Reference ephemeris found no rise/set events in the window.")
        return 1

    d_rise = _nearest_residual_seconds(np, np.array(our_rise), ref_rise)
    d_set = _nearest_residual_seconds(np, np.array(our_set), ref_set)

    print(f"Validated {len(days)} days from {days[0]} at lat={args.lat} lon={args.lon}")
    print(f"  RA  residual (arcsec): max |{np.nanmax(np.abs(d_ra)):.2f}|")
    print(f"  Dec residual (arcsec): max |{np.nanmax(np.abs(d_dec)):.2f}|")
    print(f"  Sunrise residual (s) : max |{np.nanmax(np.abs(d_rise)):.1f}|")
    print(f"  Sunset residual (s)  : max |{np.nanmax(np.abs(d_set)):.1f}|")

    # 4. Plotting
    x = np.arange(len(days))
    fig, axs = plt.subplots(2, 1, figsize=(12, 8), sharex=True)

    axs[0].plot(x, d_ra, lw=0.8, color="orange", label="Right ascension")
    axs[0].plot(x, d_dec, lw=0.8, color="blue", label="Declination")
    axs[0].set_title("Apparent Solar Position Error (Analytical - skyfield)")
    axs[0].set_ylabel("Error (arcsec)")
    axs[0].legend()
    axs[0].grid(True, alpha=0.3)

    axs[1].plot(x, d_rise, lw=0.8, color="green", label="Sunrise")
    axs[1].plot(x, d_set, lw=0.8, color="red", label="Sunset")
    axs[1].set_title("Rise/Set Time Error (Analytical - skyfield)")
    axs[1].set_ylabel("Error (s)")
    axs[1].set_xlabel(f"Days since {days[0]}")
    axs[1].legend()
    axs[1].grid(True, alpha=0.3)

    plt.tight_layout()
    plt.savefig(args.out_png, dpi=200)
    print(f"Validation complete. Plot saved to {args.out_png}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
