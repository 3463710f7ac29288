"""
Heuristic health insight generation.

Each analyzer takes the readings of one metric type, oldest first, and returns
the insights that apply. Nothing here touches the database.
"""

from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

from core.utils.helpers import ensure_utc, round_half_up
from domain.enums import InsightCategory, InsightSeverity, InsightType, MetricType


@dataclass
class GeneratedInsight:
    insight_type: InsightType
    category: InsightCategory
    title: str
    description: str
    severity: InsightSeverity
    confidence: float
    data_points: Optional[List[str]] = field(default=None)


def _ids(metrics: Iterable) -> List[str]:
    return [str(m.id) for m in metrics]


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def _pressure(metric, key: str) -> float:
    data = metric.additional_data or {}
    return data.get(key) or 0


def group_by_type(metrics: Iterable) -> Dict[MetricType, List]:
    """Group readings by metric type, each group ordered by recorded time"""
    grouped: Dict[MetricType, List] = OrderedDict()
    for metric in sorted(metrics, key=lambda m: ensure_utc(m.recorded_at)):
        grouped.setdefault(MetricType(metric.metric_type), []).append(metric)
    return grouped


def analyze_blood_pressure(metrics: List) -> List[GeneratedInsight]:
    insights: List[GeneratedInsight] = []
    if len(metrics) < 3:
        return insights

    recent = metrics[-7:]
    avg_systolic = _mean([_pressure(m, "systolic") for m in recent])
    avg_diastolic = _mean([_pressure(m, "diastolic") for m in recent])

    if avg_systolic > 140 or avg_diastolic > 90:
        insights.append(
            GeneratedInsight(
                insight_type=InsightType.RISK,
                category=InsightCategory.CARDIOVASCULAR,
                title="Elevated Blood Pressure Detected",
                description=(
                    "Your average blood pressure over the last 7 readings is "
                    f"{round_half_up(avg_systolic)}/{round_half_up(avg_diastolic)} mmHg, "
                    "which is above the normal range. Consider consulting your "
                    "healthcare provider."
                ),
                severity=(
                    InsightSeverity.ALERT if avg_systolic > 160 else InsightSeverity.WARNING
                ),
                confidence=0.92,
                data_points=_ids(recent),
            )
        )

    if len(metrics) >= 10:
        older = metrics[-10:-5]
        newer = metrics[-5:]
        drop = _mean([_pressure(m, "systolic") for m in older]) - _mean(
            [_pressure(m, "systolic") for m in newer]
        )
        if drop > 5:
            insights.append(
                GeneratedInsight(
                    insight_type=InsightType.ACHIEVEMENT,
                    category=InsightCategory.CARDIOVASCULAR,
                    title="Blood Pressure Improving!",
                    description=(
                        "Great news! Your blood pressure has decreased by an average of "
                        f"{round_half_up(drop)} mmHg over the past readings. "
                        "Keep up the good work!"
                    ),
                    severity=InsightSeverity.INFO,
                    confidence=0.88,
                    data_points=_ids(older + newer),
                )
            )

    return insights


def analyze_heart_rate(metrics: List) -> List[GeneratedInsight]:
    insights: List[GeneratedInsight] = []
    if len(metrics) < 5:
        return insights

    recent = metrics[-10:]
    avg = _mean([m.value for m in recent])

    if avg < 60:
        insights.append(
            GeneratedInsight(
                insight_type=InsightType.TREND,
                category=InsightCategory.CARDIOVASCULAR,
                title="Low Resting Heart Rate",
                description=(
                    f"Your average resting heart rate is {round_half_up(avg)} bpm. "
                    "This could indicate good cardiovascular fitness, but consult your "
                    "doctor if you experience dizziness or fatigue."
                ),
                severity=InsightSeverity.WARNING if avg < 50 else InsightSeverity.INFO,
                confidence=0.85,
                data_points=_ids(recent),
            )
        )
    elif avg > 100:
        insights.append(
            GeneratedInsight(
                insight_type=InsightType.RISK,
                category=InsightCategory.CARDIOVASCULAR,
                title="Elevated Resting Heart Rate",
                description=(
                    f"Your average resting heart rate is {round_half_up(avg)} bpm, "
                    "which is above the normal range. Consider discussing this with "
                    "your healthcare provider."
                ),
                severity=InsightSeverity.WARNING,
                confidence=0.87,
                data_points=_ids(recent),
            )
        )

    return insights


def analyze_weight(metrics: List) -> List[GeneratedInsight]:
    insights: List[GeneratedInsight] = []
    if len(metrics) < 5:
        return insights

    recent = metrics[-30:]
    first = recent[0].value
    # A non-positive baseline has no meaningful percentage change
    if first <= 0:
        return insights

    change = recent[-1].value - first
    pct = change / first * 100

    if change < -5 and pct < -5:
        insights.append(
            GeneratedInsight(
                insight_type=InsightType.TREND,
                category=InsightCategory.WEIGHT,
                title="Significant Weight Loss Detected",
                description=(
                    f"You've lost {abs(change):.1f} kg ({abs(pct):.1f}%) over recent "
                    "measurements. If unintentional, please consult your healthcare "
                    "provider."
                ),
                severity=InsightSeverity.WARNING if pct < -10 else InsightSeverity.INFO,
                confidence=0.90,
                data_points=_ids(recent),
            )
        )

    if change > 5 and pct > 5:
        insights.append(
            GeneratedInsight(
                insight_type=InsightType.TREND,
                category=InsightCategory.WEIGHT,
                title="Weight Gain Observed",
                description=(
                    f"You've gained {change:.1f} kg ({pct:.1f}%) over recent "
                    "measurements. Consider reviewing your diet and exercise routine "
                    "with your healthcare provider."
                ),
                severity=InsightSeverity.INFO,
                confidence=0.90,
                data_points=_ids(recent),
            )
        )

    if abs(pct) < 2 and len(recent) >= 20:
        insights.append(
            GeneratedInsight(
                insight_type=InsightType.ACHIEVEMENT,
                category=InsightCategory.WEIGHT,
                title="Stable Weight Maintained",
                description=(
                    "Excellent! You've maintained a stable weight with less than 2% "
                    f"variation over {len(recent)} measurements. Consistency is key "
                    "to good health!"
                ),
                severity=InsightSeverity.INFO,
                confidence=0.85,
                data_points=_ids(recent),
            )
        )

    return insights


def analyze_glucose(metrics: List) -> List[GeneratedInsight]:
    insights: List[GeneratedInsight] = []
    if len(metrics) < 3:
        return insights

    recent = metrics[-14:]
    avg = _mean([m.value for m in recent])

    if avg > 126:
        insights.append(
            GeneratedInsight(
                insight_type=InsightType.RISK,
                category=InsightCategory.DIABETES,
                title="Elevated Blood Glucose Levels",
                description=(
                    f"Your average fasting blood glucose is {round_half_up(avg)} mg/dL, "
                    "which is above the normal range. This may indicate prediabetes or "
                    "diabetes. Please consult your healthcare provider."
                ),
                severity=InsightSeverity.ALERT if avg > 140 else InsightSeverity.WARNING,
                confidence=0.93,
                data_points=_ids(recent),
            )
        )

    if 70 <= avg <= 100:
        insights.append(
            GeneratedInsight(
                insight_type=InsightType.ACHIEVEMENT,
                category=InsightCategory.DIABETES,
                title="Blood Glucose Well Controlled",
                description=(
                    f"Great job! Your average blood glucose level is {round_half_up(avg)} "
                    "mg/dL, which is within the healthy range. Keep up the good work!"
                ),
                severity=InsightSeverity.INFO,
                confidence=0.88,
                data_points=_ids(recent),
            )
        )

    return insights


def general_recommendations(metrics_by_type: Dict[MetricType, List]) -> List[GeneratedInsight]:
    tracked = len(metrics_by_type)

    if tracked >= 3:
        return [
            GeneratedInsight(
                insight_type=InsightType.ACHIEVEMENT,
                category=InsightCategory.GENERAL,
                title="Excellent Health Tracking!",
                description=(
                    f"You're actively monitoring {tracked} different health metrics. "
                    "Consistent tracking is a key factor in maintaining good health and "
                    "catching potential issues early."
                ),
                severity=InsightSeverity.INFO,
                confidence=0.95,
            )
        ]

    return [
        GeneratedInsight(
            insight_type=InsightType.RECOMMENDATION,
            category=InsightCategory.GENERAL,
            title="Expand Your Health Monitoring",
            description=(
                "Consider tracking additional metrics like blood pressure, weight, and "
                "heart rate for a more complete picture of your health."
            ),
            severity=InsightSeverity.INFO,
            confidence=0.80,
        )
    ]


def generate_insights(metrics_by_type: Dict[MetricType, List]) -> List[GeneratedInsight]:
    """Run every analyzer over readings already grouped by type"""
    insights: List[GeneratedInsight] = []
    insights.extend(analyze_blood_pressure(metrics_by_type.get(MetricType.BLOOD_PRESSURE, [])))
    insights.extend(analyze_heart_rate(metrics_by_type.get(MetricType.HEART_RATE, [])))
    insights.extend(analyze_weight(metrics_by_type.get(MetricType.WEIGHT, [])))
    insights.extend(analyze_glucose(metrics_by_type.get(MetricType.GLUCOSE, [])))
    insights.extend(general_recommendations(metrics_by_type))
    return insights
