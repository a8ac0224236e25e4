#!/usr/bin/env python3
"""Rank a profile pool for one user"""
import sys
import argparse
import json
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from mentormatch.matching import MatchingEngine, load_profiles
from mentormatch.utils import logger, config


def main():
    parser = argparse.ArgumentParser(description="Generate mentor/mentee recommendations")
    parser.add_argument("--profiles", required=True, help="Path to a JSON array of profiles")
    parser.add_argument("--user-id", required=True, help="Profile to find matches for")
    parser.add_argument("--limit", type=int, default=config.default_limit, help="Maximum matches to return")
    parser.add_argument("--mode", choices=["best", "enhanced", "instant"], default="best")
    parser.add_argument("--output", help="Output JSON file")
    args = parser.parse_args()

    profiles = load_profiles(args.profiles)
    user = next((p for p in profiles if p.id == args.user_id), None)
    if user is None:
        logger.error(f"No profile with id {args.user_id} in {args.profiles}")
        sys.exit(1)

    engine = MatchingEngine.from_config(config)
    logger.info(f"Generating {args.mode} matches for {user.id}")

    if args.mode == "instant":
        matches = engine.get_instant_matches(user, profiles)
    elif args.mode == "enhanced":
        matches = engine.find_enhanced_matches(user, profiles, args.limit)
    elif user.role == "mentee":
        matches = engine.find_best_matches(user, profiles, args.limit)
    else:
        matches = engine.find_best_mentees(user, profiles, args.limit)

    output = {
        "user_id": user.id,
        "role": user.role,
        "mode": args.mode,
        "matches": [dict(m.model_dump(), label=m.label) for m in matches]
    }

    if args.output:
        with open(args.output, 'w') as f:
            json.dump(output, f, indent=2)
        logger.info(f"✓ Saved {len(matches)} matches to {args.output}")
    else:
        print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
