"""
Study guide generation client.

Sends a student's weak subjects to a remote text-generation endpoint and
returns the markdown study guide it writes. The endpoint is any
OpenAI-compatible chat-completions API (a hosted gateway or a local Ollama).
"""

import logging
from datetime import datetime, timezone
from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import (
    STUDY_GUIDE_URL,
    STUDY_GUIDE_MODEL,
    STUDY_GUIDE_API_KEY,
    STUDY_GUIDE_TIMEOUT,
)
from ..models import StudyGuide

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an expert academic study guide creator. Always format responses "
    "in clear markdown with proper headings, lists, and structure."
)

GUIDE_INSTRUCTIONS = """Create a detailed study guide that:

1. **Prioritizes weak areas**: Focus heavily on CLOs and subjects where the student scored below 60%
2. **Provides actionable strategies**: Give specific, practical study techniques for each weak CLO
3. **Includes resources**: Suggest textbooks, online resources, practice problems, and tutorials
4. **Sets goals**: Define clear, measurable learning objectives
5. **Creates a timeline**: Suggest a realistic study schedule (e.g., "Week 1-2: Focus on X")
6. **Addresses root causes**: Identify why the student might be struggling (conceptual gaps, practice needs, etc.)

For each weak CLO, provide:
- Clear explanation of what mastery looks like
- 3-5 specific study activities
- Recommended resources (be specific - name actual books, websites, YouTube channels)
- Self-assessment questions
- Estimated time to improve

Format the guide with:
- Clear headings and sections
- Bullet points for easy reading
- Priority levels (High/Medium/Low)
- Checkboxes for tracking progress

Keep the tone motivating and supportive. Include encouragement and realistic expectations.

Generate a study guide that is 1500-2500 words, highly specific to the student's actual weak points."""


ERROR_MESSAGES = {
    429: "Rate limit exceeded. Please try again later.",
    402: "Payment required. Please add credits to your AI workspace.",
}


class StudyGuideError(Exception):
    """The endpoint refused or failed to produce a study guide."""
    
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def create_retry_session() -> requests.Session:
    """Session that retries transient gateway failures with backoff."""
    session = requests.Session()
    retries = Retry(
        total=3,
        backoff_factor=1,  # Wait 1s, 2s, 4s on gateway errors
        status_forcelist=[502, 503, 504],
        allowed_methods=["POST"],
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retries)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


class StudyGuideClient:
    """
    Client for the study guide text-generation endpoint.
    
    USAGE:
        client = StudyGuideClient()
        analysis = analyzer.analyze_student_performance(student)
        guide = client.generate(analysis.weak_subjects, focus_area="exam prep")
        print(guide.content)
    """
    
    def __init__(self, url: str = STUDY_GUIDE_URL, model: str = STUDY_GUIDE_MODEL,
                 api_key: str = STUDY_GUIDE_API_KEY, timeout: float = STUDY_GUIDE_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.url = url
        self.model = model
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or create_retry_session()
    
    def build_prompt(self, subjects: list, focus_area: str = "") -> str:
        """
        Render the weak-subject summary into the study guide prompt.
        
        Args:
            subjects: List of SubjectPerformance to cover
            focus_area: Optional extra emphasis, e.g. "final exams"
        """
        sections = []
        for subject in subjects:
            weak_lines = "\n".join(
                f"  - CLO {clo.clo_number}: {clo.description} (Current: {clo.score:.0f}%)"
                for clo in subject.weak_clos
            )
            sections.append(
                f"**{subject.name} ({subject.code})**\n"
                f"- Current Grade: {subject.grade} ({int(subject.overall_performance + 0.5)}%)\n"
                f"- Weak Areas (CLOs scoring <60%):\n"
                f"{weak_lines or '  (None - performing well)'}\n"
            )
        
        prompt = (
            "You are an expert academic advisor and study guide creator for university students.\n\n"
            "Generate a comprehensive, personalized study guide for a student based on their "
            "performance analysis:\n\n"
            + "\n".join(sections)
        )
        if focus_area:
            prompt += f"\n**Special Focus:** {focus_area}\n"
        return prompt + "\n" + GUIDE_INSTRUCTIONS
    
    def generate(self, subjects: list, focus_area: str = "") -> StudyGuide:
        """
        Request a study guide for the given subjects.
        
        Raises:
            ValueError: no subjects given
            StudyGuideError: the endpoint returned an error or no content
            requests.RequestException: the endpoint could not be reached
        """
        if not subjects:
            raise ValueError("At least one subject is required")
        
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": self.build_prompt(subjects, focus_area)},
            ],
            "stream": False,
        }
        
        logger.info("Generating study guide for subjects: %s",
                    ", ".join(s.code for s in subjects))
        resp = self.session.post(self.url, json=payload, headers=headers, timeout=self.timeout)
        
        if resp.status_code != 200:
            logger.error("Study guide endpoint error: %s %s", resp.status_code, resp.text)
            message = ERROR_MESSAGES.get(resp.status_code, "AI generation failed")
            raise StudyGuideError(message, resp.status_code)
        
        data = resp.json()
        choices = data.get("choices") or [{}]
        content = (choices[0].get("message") or {}).get("content")
        if not content:
            raise StudyGuideError("No content in AI response", resp.status_code)
        
        return StudyGuide(
            content=content,
            generated_at=datetime.now(timezone.utc).isoformat(),
            subjects_analyzed=len(subjects),
            total_weak_clos=sum(len(s.weak_clos) for s in subjects),
        )
