from .assessment import (
    AssessmentAnswer,
    AssessmentRecommendation,
    AssessmentRequest,
    AssessmentResult,
    AssessmentSummary,
    ScoredAnswer,
    SkillHighlight,
    SkillScore,
)
from .base import CamelModel
from .evaluation import (
    AnswerEvaluation,
    CoachMode,
    EvaluationScore,
    EvaluatorReply,
    QualityVerdict,
    QuestionType,
)
from .reports import (
    AtsReport,
    AtsSubscores,
    DocumentMetrics,
    JdMatchReport,
    KeywordStats,
    ResumeScanReport,
    SectionMap,
)
from .requests import AnswerEvaluationRequest, AtsScanRequest, JdMatchRequest

__all__ = [
    "CamelModel",
    "SectionMap",
    "DocumentMetrics",
    "AtsSubscores",
    "AtsReport",
    "KeywordStats",
    "JdMatchReport",
    "ResumeScanReport",
    "QualityVerdict",
    "EvaluationScore",
    "EvaluatorReply",
    "AnswerEvaluation",
    "QuestionType",
    "CoachMode",
    "AtsScanRequest",
    "JdMatchRequest",
    "AnswerEvaluationRequest",
    "AssessmentAnswer",
    "AssessmentRequest",
    "ScoredAnswer",
    "SkillScore",
    "SkillHighlight",
    "AssessmentRecommendation",
    "AssessmentSummary",
    "AssessmentResult",
]
