# resumeai/services/prompts.py
from __future__ import annotations

# ---------- System messages ----------
CAREER_PATH_SYSTEM = "You are a helpful AI career assistant."
RESUME_PARSE_SYSTEM = "You are a helpful resume assistant."
SUGGESTIONS_SYSTEM = (
    "You are an expert resume writer and career coach. Focus on:\n"
    "1. Professional, concise, and compelling language\n"
    "2. Resume-appropriate tone\n"
    "3. Action-oriented and achievement-focused statements\n"
    "4. For employment history, focus on bullet points that describe what the candidate "
    "did at the job that would help them land an interview. Use action verbs and quantify "
    "results where possible.\n"
    "Return only the 5 best bullet points as bullet points."
)

# Shape of ResumeData as described to the model
RESUME_SCHEMA = """{
  personalInfo: {
    fullName: string,
    title: string,
    email: string,
    phone: string,
    location: string,
    photo: string
  },
  profile: string,
  experience: Array<{
    title: string,
    company: string,
    startDate: string,
    endDate: string,
    description: string[]
  }>,
  education: Array<{
    degree: string,
    school: string,
    startDate: string,
    endDate: string
  }>,
  websites: Array<{
    label: string,
    url: string
  }>
}"""


# ---------- Builders ----------
def build_career_path_prompt(profession: str) -> str:
    return (
        "You are a career coach and job market expert. "
        f"For someone who wants to become a {profession}, provide a step-by-step career roadmap "
        "as a JSON array of steps. Each step should have:\n"
        '- id: a unique string identifier (use lowercase, hyphenated, e.g. "bachelor-degree")\n'
        "- title: the step title\n"
        "- description: a brief description\n"
        "- prerequisiteIds: an array of step ids that must be completed before this step "
        "(empty array if none)\n"
        "- childrenIds: an array of step ids that follow from this step (empty array if none)\n"
        "- links: (optional) array of {label, url} for recommended courses or certifications\n"
        "\n"
        "The roadmap should support branching (e.g., after a degree, multiple career paths may "
        "be possible). Make sure the ids in prerequisiteIds and childrenIds match the ids of "
        "other steps.\n"
        "\n"
        "Respond with ONLY a valid JSON array, no explanation, no markdown, and no extra text."
    )


def build_resume_parse_prompt(text: str) -> str:
    return (
        "You are a resume assistant. Given the following resume text, extract all relevant "
        "information, improve the content for clarity and professionalism, and return the "
        "result as a JSON object matching this schema (do not include any explanation, just "
        f"the JSON):\n\nSchema: {RESUME_SCHEMA}\n\nResume:\n{text}"
    )
