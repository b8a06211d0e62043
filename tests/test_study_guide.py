import pytest

from advising.models import AssessmentType, CLOScore, SubjectPerformance
from advising.services import StudyGuideClient, StudyGuideError, create_retry_session


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload or {}
        self.text = text
    
    def json(self):
        return self._payload


class FakeSession:
    """Records POSTs and answers with a canned response."""
    
    def __init__(self, response):
        self.response = response
        self.calls = []
    
    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        return self.response


def make_subject(code="PHY102", name="Physics II", performance=40.0, weak_scores=(45, 52)):
    weak = [
        CLOScore(i, f"Outcome {i}", score, AssessmentType.QUIZ)
        for i, score in enumerate(weak_scores, 1)
    ]
    return SubjectPerformance(
        code=code, name=name, overall_performance=performance, grade="D",
        grade_points=1.6, credits=4, semester="Spring 2023", clo_scores=weak,
        weak_clos=weak, trend="stable", needs_attention=True,
    )


def completion(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def test_build_prompt():
    client = StudyGuideClient(session=FakeSession(FakeResponse()))
    prompt = client.build_prompt(
        [make_subject(), make_subject("CS101", "Programming", 66.5, ())],
        focus_area="final exams",
    )
    
    assert "**Physics II (PHY102)**" in prompt
    assert "- Current Grade: D (40%)" in prompt
    assert "  - CLO 1: Outcome 1 (Current: 45%)" in prompt
    assert "**Programming (CS101)**" in prompt
    assert "(67%)" in prompt
    assert "(None - performing well)" in prompt
    assert "**Special Focus:** final exams" in prompt


def test_generate():
    session = FakeSession(FakeResponse(payload=completion("# Study Guide")))
    client = StudyGuideClient(url="https://ai.example/v1/chat/completions", model="m",
                              api_key="secret", session=session)
    guide = client.generate([make_subject(), make_subject("CS101", weak_scores=(10,))])
    
    assert guide.content == "# Study Guide"
    assert guide.subjects_analyzed == 2
    assert guide.total_weak_clos == 3
    assert guide.generated_at
    
    url, kwargs = session.calls[0]
    assert url == "https://ai.example/v1/chat/completions"
    assert kwargs["headers"]["Authorization"] == "Bearer secret"
    assert kwargs["json"]["model"] == "m"
    assert [m["role"] for m in kwargs["json"]["messages"]] == ["system", "user"]


def test_generate_without_api_key_sends_no_auth():
    session = FakeSession(FakeResponse(payload=completion("ok")))
    StudyGuideClient(api_key="", session=session).generate([make_subject()])
    assert "Authorization" not in session.calls[0][1]["headers"]


def test_generate_requires_subjects():
    session = FakeSession(FakeResponse())
    with pytest.raises(ValueError, match="At least one subject"):
        StudyGuideClient(session=session).generate([])
    assert session.calls == []


@pytest.mark.parametrize("status, message", [
    (429, "Rate limit exceeded. Please try again later."),
    (402, "Payment required. Please add credits to your AI workspace."),
    (500, "AI generation failed"),
])
def test_generate_errors(status, message):
    client = StudyGuideClient(session=FakeSession(FakeResponse(status, text="boom")))
    with pytest.raises(StudyGuideError, match=message) as excinfo:
        client.generate([make_subject()])
    assert excinfo.value.status_code == status


def test_generate_empty_content():
    client = StudyGuideClient(session=FakeSession(FakeResponse(payload={"choices": []})))
    with pytest.raises(StudyGuideError, match="No content"):
        client.generate([make_subject()])


def test_retry_session():
    session = create_retry_session()
    retries = session.get_adapter("https://example.com").max_retries
    assert retries.total == 3
    assert 503 in retries.status_forcelist


def test_prompt_carries_formatting_instructions():
    prompt = StudyGuideClient(session=FakeSession(FakeResponse())).build_prompt([make_subject()])
    assert "Format the guide with:" in prompt
    assert "- Priority levels (High/Medium/Low)" in prompt
    assert "- Checkboxes for tracking progress" in prompt
    assert "(conceptual gaps, practice needs, etc.)" in prompt
    assert "name actual books, websites, YouTube channels" in prompt
    assert prompt.rstrip().endswith("highly specific to the student's actual weak points.")
