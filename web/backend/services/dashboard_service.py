"""
Dashboard view model - maps a stored insight onto display cards.

Pure presentation: every card gets a value even when the insight is
missing or was stored from a fallback record.
"""

from datetime import datetime
from typing import Any, List, Optional

from database.models import IndustryInsight
from ..models.responses import DashboardView, SalaryBar
from ..utils import clamp, days_until, parse_percentage, safe_datetime_iso, safe_float

DEFAULT_SALARY_DATA = [
    {"role": "Software Engineer", "min": 80, "median": 120, "max": 150},
    {"role": "Data Scientist", "min": 90, "median": 135, "max": 180},
    {"role": "DevOps Engineer", "min": 95, "median": 130, "max": 160},
    {"role": "Frontend Developer", "min": 70, "median": 110, "max": 145},
    {"role": "Backend Developer", "min": 85, "median": 125, "max": 155},
    {"role": "Project Manager", "min": 100, "median": 140, "max": 170},
]

DEFAULT_TOP_SKILLS = ["Python", "Java", "JavaScript", "Cloud", "Agile"]

DEFAULT_KEY_TRENDS = [
    "AI and Automation driving 60% of tech innovation.",
    "Remote work increasing demand for cloud infrastructure.",
    "Upskilling in data-driven roles becoming crucial.",
]

DEFAULT_RECOMMENDED_SKILLS = [
    "TensorFlow / PyTorch",
    "AWS / Azure Cloud",
    "Data Visualization",
    "MLOps Fundamentals",
]

DEFAULT_GROWTH_RATE = 12.0
DEFAULT_REFRESH_DAYS = 7

DEMAND_BAR_PERCENT = {"High": 85, "Medium": 60}
DEMAND_COLOR = {"High": "green", "Low": "red"}


def _non_empty_list(value: Any, default: List[Any]) -> List[Any]:
    if isinstance(value, list) and value:
        return value
    return list(default)


def _salary_bars(salary_ranges: Any) -> List[SalaryBar]:
    if not isinstance(salary_ranges, list) or not salary_ranges:
        return [SalaryBar(**row) for row in DEFAULT_SALARY_DATA]

    bars = []
    for item in salary_ranges:
        item = item if isinstance(item, dict) else {}
        role = item.get("role")
        bars.append(SalaryBar(
            role=role if isinstance(role, str) and role else "Unknown Role",
            min=safe_float(item.get("min")),
            median=safe_float(item.get("median")),
            max=safe_float(item.get("max")),
        ))
    return bars


def build_dashboard_view(
    insight: Optional[IndustryInsight],
    now: Optional[datetime] = None
) -> DashboardView:
    """
    Build the dashboard cards for an insight (or None).

    Args:
        insight: Stored insight, possibly None.
        now: Reference time for the next-update countdown.

    Returns:
        DashboardView with display defaults filled in.
    """
    growth = clamp(parse_percentage(getattr(insight, "growth_rate", None), DEFAULT_GROWTH_RATE), 0, 100)
    demand_level = getattr(insight, "demand_level", None) or "Medium"
    next_update_days = days_until(getattr(insight, "next_update", None), now)

    return DashboardView(
        industry=getattr(insight, "industry", None),
        market_outlook=getattr(insight, "market_outlook", None) or "Neutral",
        next_update_days=DEFAULT_REFRESH_DAYS if next_update_days is None else next_update_days,
        growth_rate=growth,
        growth_label=f"{growth:.1f}%",
        demand_level=demand_level,
        demand_bar_percent=DEMAND_BAR_PERCENT.get(demand_level, 40),
        demand_color=DEMAND_COLOR.get(demand_level, "yellow"),
        top_skills=_non_empty_list(getattr(insight, "top_skills", None), DEFAULT_TOP_SKILLS),
        salary_data=_salary_bars(getattr(insight, "salary_ranges", None)),
        key_trends=_non_empty_list(getattr(insight, "key_trends", None), DEFAULT_KEY_TRENDS),
        recommended_skills=_non_empty_list(
            getattr(insight, "recommended_skills", None), DEFAULT_RECOMMENDED_SKILLS
        ),
        last_updated=safe_datetime_iso(getattr(insight, "last_updated", None)),
    )
