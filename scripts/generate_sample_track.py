#!/usr/bin/env python3
"""
Generate a synthetic hike track for `hike replay`.

The walk heads roughly north-east at hiking speed, climbs steadily, and mixes
in the noise real phones produce: sub-meter jitter while standing still and
the occasional multipath jump.

Usage:
    uv run python scripts/generate_sample_track.py --out data/sample_hike.json
    uv run hike replay data/sample_hike.json --local data/hikes
"""

import argparse
import json
import math
import random
import time
from pathlib import Path

METERS_PER_DEGREE_LAT = 111_195.0


def generate_samples(
    count: int,
    seed: int,
    start_lat: float = 46.5580,
    start_lon: float = 7.8350,
    start_alt: float = 1200.0,
) -> list[dict[str, float | None]]:
    """Build a list of sample dicts, one every five seconds."""
    rng = random.Random(seed)
    lat, lon, alt = start_lat, start_lon, start_alt
    t0 = time.time()
    heading = math.radians(40)

    samples: list[dict[str, float | None]] = []
    for i in range(count):
        roll = rng.random()
        if roll < 0.05:
            # Standing still: sub-meter jitter
            jitter_lat = lat + rng.uniform(-0.3, 0.3) / METERS_PER_DEGREE_LAT
            samples.append(_sample(jitter_lat, lon, alt, 0.0, t0 + i * 5))
            continue
        if roll < 0.07:
            # Multipath glitch a few hundred meters off
            glitch_lat = lat + rng.uniform(200, 400) / METERS_PER_DEGREE_LAT
            samples.append(_sample(glitch_lat, lon, alt, None, t0 + i * 5))
            continue

        speed = rng.uniform(1.0, 1.6)
        step = speed * 5  # five seconds of walking
        heading += rng.uniform(-0.2, 0.2)
        lat += step * math.cos(heading) / METERS_PER_DEGREE_LAT
        lon += step * math.sin(heading) / (METERS_PER_DEGREE_LAT * math.cos(math.radians(lat)))
        alt += rng.uniform(-0.5, 1.5)
        samples.append(_sample(lat, lon, alt, speed, t0 + i * 5))

    return samples


def _sample(lat: float, lon: float, alt: float, speed: float | None, ts: float) -> dict[str, float | None]:
    return {
        "latitude": round(lat, 7),
        "longitude": round(lon, 7),
        "altitude": round(alt, 1),
        "speed": None if speed is None else round(speed, 2),
        "timestamp": round(ts, 3),
    }


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--out", type=Path, default=Path("data/sample_hike.json"))
    parser.add_argument("--count", type=int, default=600)
    parser.add_argument("--seed", type=int, default=7)
    args = parser.parse_args()

    samples = generate_samples(args.count, args.seed)
    args.out.parent.mkdir(parents=True, exist_ok=True)
    with open(args.out, "w") as f:
        json.dump(samples, f, indent=2)

    print(f"Wrote {len(samples)} samples to {args.out}")


if __name__ == "__main__":
    main()
