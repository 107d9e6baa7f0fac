#!/usr/bin/env python3
"""Seed a fresh Supabase project with a sample resume, user and analytics row."""

import sys

from resumeai.config import get_config
from resumeai.extensions import init_supabase
from resumeai.seed import init_store


def main() -> int:
    try:
        supabase = init_supabase(get_config())
    except RuntimeError as e:
        print(str(e), file=sys.stderr)
        return 1
    resume_id = init_store(supabase)
    print(f"Store initialized with sample data (resume {resume_id}).")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
