#!/usr/bin/env python3
"""Rank the pool for every profile of one role"""
import sys
import argparse
import json
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from mentormatch.batch_processor import BatchMatchProcessor
from mentormatch.matching import load_profiles
from mentormatch.utils import config, monitor


def main():
    parser = argparse.ArgumentParser(description="Batch mentor/mentee ranking")
    parser.add_argument("--profiles", required=True, help="Path to a JSON array of profiles")
    parser.add_argument("--role", choices=["mentor", "mentee"], default="mentee", help="Profiles to rank for")
    parser.add_argument("--limit", type=int, default=config.default_limit)
    parser.add_argument("--workers", type=int, default=config.batch_workers)
    parser.add_argument("--mode", choices=BatchMatchProcessor.MODES, default="best")
    parser.add_argument("--output-dir", help="Directory for per-profile JSON output")
    args = parser.parse_args()

    profiles = load_profiles(args.profiles)
    targets = [p for p in profiles if p.role == args.role]

    processor = BatchMatchProcessor(max_workers=args.workers, mode=args.mode)
    report = processor.process_batch(targets, profiles, args.limit, args.output_dir)

    print(json.dumps({"summary": report["summary"], "performance": monitor.get_report()}, indent=2))


if __name__ == "__main__":
    main()
