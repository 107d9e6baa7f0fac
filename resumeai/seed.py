# resumeai/seed.py
"""
Sample rows for a fresh Supabase project. Used by the scripts in scripts/.
Nothing here is idempotent: every run inserts new `resumes` / `paths` rows.
"""
from __future__ import annotations
import logging
from datetime import datetime, timedelta, timezone

logger = logging.getLogger(__name__)

SAMPLE_USER_ID = "sampleUser1"
DUMMY_PATHS_USER_ID = "testUser123"

SAMPLE_RESUME = {
    "user_id": SAMPLE_USER_ID,
    "length": 2,
    "type": "resume",
    "status": "completed",
    "education": [
        {"degree": "BSc Computer Science", "school": "UCLA", "startDate": "2015", "endDate": "2019"},
    ],
    "experience": [
        {
            "company": "Tech Co",
            "title": "Developer",
            "description": ["Built web apps"],
            "startDate": "2019-06",
            "endDate": "2021-08",
        },
    ],
    "personal_info": {
        "email": "jane.doe@example.com",
        "fullName": "Jane Doe",
        "location": "Los Angeles, USA",
        "phone": "1234567890",
        "photo": "",
        "title": "Software Engineer",
        "profile": "Passionate about building products.",
    },
    "websites": [{"label": "Portfolio", "url": "https://janedoe.com"}],
}

ANALYTICS_GLOBAL = {"id": "global", "total_users": 1, "total_resumes": 1, "resumes_this_week": 1}

DUMMY_USERS = [
    {"id": "user1", "email": "alice@example.com", "first_name": "Alice", "last_name": "Smith",
     "location": "34.0522,-118.2437", "type": "free", "state": "California"},
    {"id": "user2", "email": "bob@example.com", "first_name": "Bob", "last_name": "Johnson",
     "location": "40.7128,-74.0060", "type": "paid", "state": "New York"},
    {"id": "user3", "email": "carol@example.com", "first_name": "Carol", "last_name": "Williams",
     "location": "41.8781,-87.6298", "type": "admin", "state": "Illinois"},
]
DUMMY_PROFESSIONS = ["Data Scientist", "UX Designer", "Cloud Engineer"]

# (days ago, profession)
DUMMY_PATHS = [
    (1, "Data Scientist"),
    (2, "UX Designer"),
    (3, "Cloud Engineer"),
    (10, "Product Manager"),
    (15, "Marketing Specialist"),
    (0, "AI Researcher"),
]


def _now() -> datetime:
    return datetime.now(timezone.utc)


def init_store(supabase) -> str:
    """Insert one resume, the user that owns it and the global analytics row. Returns the resume id."""
    res = supabase.table("resumes").insert(dict(SAMPLE_RESUME)).execute()
    resume_id = res.data[0]["id"]

    supabase.table("users").upsert({
        "id": SAMPLE_USER_ID,
        "created_at": "2025-06-03T21:41:43.008Z",
        "email": "zab.cahrles+mike@gmail.com",
        "first_name": "Mike",
        "last_name": "Coxsmall",
        "location": "34.0522,-118.2437",
        "phone": "",
        "resume_ids": [resume_id],
        "state": "AK",
        "zip": "99580",
        "call_count": 5,
        "total_tokens": 100,
    }).execute()

    supabase.table("analytics").upsert(dict(ANALYTICS_GLOBAL)).execute()
    logger.info("store initialised; sample resume id=%s", resume_id)
    return resume_id


def add_dummy_data(supabase) -> int:
    """Three users, each with a resume, a cover letter and a career path. Returns users written."""
    for user, profession in zip(DUMMY_USERS, DUMMY_PROFESSIONS):
        now = _now().isoformat()
        supabase.table("users").upsert({
            **user,
            "created_at": now,
            "total_resumes": 1,
            "total_api_calls": 1,
            "total_tokens": 1000,
        }).execute()
        supabase.table("resumes").insert({
            "user_id": user["id"], "created_at": now, "type": "resume",
            "title": f"{user['first_name']}'s Resume",
        }).execute()
        supabase.table("resumes").insert({
            "user_id": user["id"], "created_at": now, "type": "coverLetter",
            "title": f"{user['first_name']}'s Cover Letter",
        }).execute()
        supabase.table("paths").insert({
            "user_id": user["id"], "created_at": now, "profession": profession,
        }).execute()
    return len(DUMMY_USERS)


def add_dummy_paths(supabase, user_id: str = DUMMY_PATHS_USER_ID) -> list[tuple[str, str]]:
    """Career-path rows spread over the last two weeks. Returns (profession, created_at) pairs."""
    now = _now()
    added = []
    for days_ago, profession in DUMMY_PATHS:
        created_at = (now - timedelta(days=days_ago)).isoformat()
        supabase.table("paths").insert({
            "user_id": user_id, "created_at": created_at, "profession": profession,
        }).execute()
        added.append((profession, created_at))
    return added
