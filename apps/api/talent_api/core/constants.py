"""Shared API constants."""

# Known technology / role terms mined from free-text headlines. Order is the
# order extracted skills are reported in.
SKILL_VOCABULARY: tuple[str, ...] = (
    "JavaScript",
    "TypeScript",
    "React",
    "Angular",
    "Vue",
    "Node.js",
    "Python",
    "Java",
    "C#",
    "C++",
    "Go",
    "Ruby",
    "PHP",
    "Swift",
    "Kotlin",
    "SQL",
    "MongoDB",
    "PostgreSQL",
    "AWS",
    "Azure",
    "GCP",
    "Docker",
    "Kubernetes",
    "DevOps",
    "Machine Learning",
    "Data Science",
    "AI",
    "UX",
    "UI",
    "Design",
    "Product Management",
    "Agile",
    "Scrum",
    "Frontend",
    "Backend",
    "Full Stack",
    "Mobile",
    "iOS",
    "Android",
)

# Returned when a headline mentions no known term, so cards always show something
DEFAULT_SKILL = "Development"

# Tokens containing these are tenure phrases ("5 years experience"), not skills
TENURE_MARKERS: tuple[str, ...] = ("years", "experience")

# Low temperature and narrow sampling: literal instruction-following over variety
SMART_SEARCH_GENERATION_CONFIG: dict = {
    "temperature": 0.2,
    "topK": 40,
    "topP": 0.95,
    "maxOutputTokens": 1024,
}

# Headers answered on the smart-search preflight
SMART_SEARCH_CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}
