DEFAULT_SYSTEM_PROMPT = "You are a helpful career assistant for job seekers."

COVER_LETTER_SYSTEM_PROMPT = """
You are an experienced career coach who writes cover letters for candidates.
Write in the first person, as the candidate. Output only the letter in Markdown.
"""

JSON_ONLY_SYSTEM_PROMPT = """
You are a labor-market and interview-preparation analyst.
Reply with a single JSON object and nothing else: no prose, no markdown fences.
"""


# Templates are str.format strings; literal JSON braces are doubled.

COVER_LETTER_PROMPT_TEMPLATE = """
Write a professional cover letter for a {job_title} position at {company_name}.

About the candidate:
- Industry: {industry}
- Experience: {experience} years
- Skills: {skills}
- Bio: {bio}

Job Description:
{job_description}

Requirements:
1. Keep tone professional yet engaging.
2. Highlight relevant experience and achievements.
3. Keep it concise (under 400 words).
4. Format as a proper business cover letter in Markdown.
"""

COVER_LETTER_FALLBACK_TEMPLATE = """
Dear Hiring Manager,

I am excited to apply for the {job_title} role at {company_name}. With {experience} years of experience in {industry} and skills in {skills}, I am confident in my ability to contribute effectively to your team.

I am particularly drawn to {company_name} because of your commitment to innovation and excellence. I look forward to the opportunity to bring my expertise and enthusiasm to your projects.

Thank you for your time and consideration.

Sincerely,
{signature}
"""

INDUSTRY_INSIGHTS_PROMPT_TEMPLATE = """
Analyze the {industry} industry and provide ONLY JSON:
{{
  "salaryRanges": [{{"role": "string", "min": number, "max": number, "median": number, "location": "string"}}],
  "growthRate": number,
  "demandLevel": "High"|"Medium"|"Low",
  "topSkills": ["skill1","skill2"],
  "marketOutlook": "Positive"|"Neutral"|"Negative",
  "keyTrends": ["trend1","trend2"],
  "recommendedSkills": ["skill1","skill2"]
}}
Include at least 5 common roles for salary ranges, at least 5 skills and trends.
Growth rate is a percentage. No markdown or text, only JSON.
"""

QUIZ_PROMPT_TEMPLATE = """
Generate {count} multiple-choice technical interview questions for a {industry} professional{expertise}.

Each question must have this JSON format:
{{
  "question": "string",
  "options": ["A", "B", "C", "D"],
  "correctAnswer": "string",
  "explanation": "string"
}}

Return only valid JSON in this structure:
{{
  "questions": [ ... ]
}}
"""

IMPROVEMENT_TIP_PROMPT_TEMPLATE = """
The user made mistakes in the following {industry} technical questions:
{wrong_summary}

Based on these, suggest a short improvement tip (2 sentences max),
focusing on what the user should learn next. Keep it positive and specific.
"""
