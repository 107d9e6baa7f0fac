# resumeai/functions/__init__.py
from __future__ import annotations

from . import career_path, parse_resume, resume_suggestions

# Public function name -> handler(event, clients)
HANDLERS = {
    "generateCareerPath": career_path.handler,
    "parseResume": parse_resume.handler,
    "generateResume": resume_suggestions.handler,
}
