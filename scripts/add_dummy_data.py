#!/usr/bin/env python3
"""Add dummy users with resumes, cover letters and career paths."""

import sys

from resumeai.config import get_config
from resumeai.extensions import init_supabase
from resumeai.seed import add_dummy_data


def main() -> int:
    try:
        supabase = init_supabase(get_config())
    except RuntimeError as e:
        print(str(e), file=sys.stderr)
        return 1
    n = add_dummy_data(supabase)
    print(f"{n} dummy users, resumes, and paths added!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
