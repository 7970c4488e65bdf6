from langchain_core.prompts import PromptTemplate

SKILL_EXTRACTION_SYSTEM_PROMPT = """
You are an expert resume analyzer. You read resumes and list the skills a
candidate demonstrates: technical skills, programming languages, frameworks,
tools, platforms and soft skills.

Rules:
1. Return the skills as a JSON array of strings and nothing else.
2. Each skill appears once; use its common name (e.g. "JavaScript", "AWS").
3. Do not include any other text, explanation or formatting.
4. If no skills are found, return an empty array [].
"""

SKILL_EXTRACTION_PROMPT = PromptTemplate.from_template(
    """Extract a comprehensive list of distinct skills from the following resume text.

Resume Text:
\"\"\"{resume_text}\"\"\"

Example Output:
["JavaScript", "React", "Node.js", "SQL", "Python", "Docker", "Git", "Agile", "Communication", "Problem-solving"]
"""
)
