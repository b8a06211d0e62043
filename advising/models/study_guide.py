"""
Study guide data model.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class StudyGuide:
    """
    A generated study guide.
    
    Attributes:
        content: Markdown text returned by the text-generation endpoint
        generated_at: ISO-8601 UTC timestamp of generation
        subjects_analyzed: Number of subjects sent in the request
        total_weak_clos: Weak CLOs across all of those subjects
    """
    content: str
    generated_at: str
    subjects_analyzed: int
    total_weak_clos: int
