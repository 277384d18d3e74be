"""
Unit tests for cover letter generation.
"""
from core.generation.cover_letter import (
    CandidateProfile,
    JobPosting,
    build_cover_letter_request,
    generate_cover_letter_content,
    render_fallback_letter,
)
from core.llm.system_prompts import COVER_LETTER_SYSTEM_PROMPT

POSTING = JobPosting(
    job_title="Backend Engineer",
    company_name="Acme",
    job_description="Build APIs with {braces} in the text.",
)

PROFILE = CandidateProfile(industry="tech", experience=5, skills=["Python", "SQL"], bio="Jane Doe")


class TestBuildCoverLetterRequest:

    def test_profile_fields_in_prompt(self):
        request = build_cover_letter_request(POSTING, PROFILE)
        prompt = request.render()

        assert "Backend Engineer position at Acme" in prompt
        assert "- Experience: 5 years" in prompt
        assert "- Skills: Python, SQL" in prompt
        assert "Build APIs with {braces} in the text." in prompt
        assert request.system_prompt == COVER_LETTER_SYSTEM_PROMPT

    def test_empty_profile_uses_placeholders(self):
        prompt = build_cover_letter_request(POSTING, CandidateProfile()).render()

        assert "- Industry: N/A" in prompt
        assert "- Skills: N/A" in prompt
        assert "- Bio: N/A" in prompt


class TestRenderFallbackLetter:

    def test_uses_profile(self):
        letter = render_fallback_letter(POSTING, PROFILE)

        assert "Backend Engineer role at Acme" in letter
        assert "With 5 years of experience in tech and skills in Python, SQL" in letter
        assert letter.rstrip().endswith("Jane Doe")

    def test_empty_profile_defaults(self):
        letter = render_fallback_letter(POSTING, CandidateProfile())

        assert "With X years of experience in your industry and skills in key technologies" in letter
        assert letter.rstrip().endswith("Your Name")


class TestGenerateCoverLetterContent:

    def test_generated_letter(self, generator, mock_llm):
        mock_llm.generate_text.return_value = "\n# Dear Acme team\n\nHello.\n"

        outcome = generate_cover_letter_content(generator, POSTING, PROFILE)

        assert outcome.status == "completed"
        assert outcome.result == "# Dear Acme team\n\nHello."

    def test_failure_uses_template(self, generator, mock_llm):
        mock_llm.generate_text.side_effect = RuntimeError("quota")

        outcome = generate_cover_letter_content(generator, POSTING, PROFILE)

        assert outcome.status == "fallback"
        assert outcome.result == render_fallback_letter(POSTING, PROFILE)
        assert mock_llm.generate_text.call_count == 1
