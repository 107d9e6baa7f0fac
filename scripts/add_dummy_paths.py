#!/usr/bin/env python3
"""Add dummy career paths for a test user (some inside the last 7 days, some older)."""

import argparse
import sys

from resumeai.config import get_config
from resumeai.extensions import init_supabase
from resumeai.seed import DUMMY_PATHS_USER_ID, add_dummy_paths


def main() -> int:
    parser = argparse.ArgumentParser(description="Insert dummy career paths")
    parser.add_argument("--user-id", default=DUMMY_PATHS_USER_ID, help="Owner of the paths")
    args = parser.parse_args()

    try:
        supabase = init_supabase(get_config())
    except RuntimeError as e:
        print(str(e), file=sys.stderr)
        return 1
    for profession, created_at in add_dummy_paths(supabase, args.user_id):
        print("Added:", profession, created_at)
    print("Dummy paths added!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
