#!/usr/bin/env python3
"""
Generate a synthetic GPS track for replaying with `runtrack track`.

The runner heads east over gentle hills, with position and altitude
noise similar to a phone GPS.

Usage:
    python scripts/generate_sample_track.py --minutes 30 --out track.json
"""

import argparse
import json
import math
import random
from pathlib import Path

from src.tracking.geo import EARTH_RADIUS_KM


def generate_samples(
    *,
    minutes: int,
    interval_s: float,
    pace_min_per_km: float,
    start_lat: float,
    start_lon: float,
    seed: int,
) -> list[dict[str, float | int | None]]:
    """Generate geolocation-shaped samples for a steady run."""
    rng = random.Random(seed)
    speed_kmh = 60.0 / pace_min_per_km
    km_per_deg_lon = math.radians(1) * EARTH_RADIUS_KM * math.cos(math.radians(start_lat))

    samples: list[dict[str, float | int | None]] = []
    steps = int(minutes * 60 / interval_s) + 1
    for i in range(steps):
        distance_km = speed_kmh * i * interval_s / 3600
        # ~3 m horizontal jitter
        lat = start_lat + rng.gauss(0, 0.00003)
        lon = start_lon + distance_km / km_per_deg_lon + rng.gauss(0, 0.00003)
        altitude = 50 + 15 * math.sin(distance_km / 1.5) + rng.gauss(0, 1.0)
        samples.append(
            {
                "lat": round(lat, 7),
                "lng": round(lon, 7),
                "timestamp": int(i * interval_s * 1000),
                # Occasional fixes without altitude
                "altitude": None if rng.random() < 0.05 else round(altitude, 1),
                "speed": round(speed_kmh / 3.6 + rng.gauss(0, 0.2), 2),
            }
        )
    return samples


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate a synthetic GPS track")
    parser.add_argument("--minutes", type=int, default=30, help="Run length in minutes")
    parser.add_argument("--interval", type=float, default=2.0, help="Seconds between fixes")
    parser.add_argument("--pace", type=float, default=5.5, help="Target pace in min/km")
    parser.add_argument("--lat", type=float, default=38.7223, help="Start latitude")
    parser.add_argument("--lon", type=float, default=-9.1393, help="Start longitude")
    parser.add_argument("--seed", type=int, default=7, help="Random seed")
    parser.add_argument("--out", type=Path, default=Path("track.json"), help="Output file")
    args = parser.parse_args()

    samples = generate_samples(
        minutes=args.minutes,
        interval_s=args.interval,
        pace_min_per_km=args.pace,
        start_lat=args.lat,
        start_lon=args.lon,
        seed=args.seed,
    )
    args.out.write_text(json.dumps(samples, indent=2))
    print(f"Wrote {len(samples)} samples to {args.out}")


if __name__ == "__main__":
    main()
