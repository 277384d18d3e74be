"""Industry insight generation."""
import logging
from typing import Any, Dict

from core.generation.generator import GenerationOutcome, GenerationRequest, TolerantGenerator
from core.generation.schema import FieldKind, FieldSpec, ResultSchema, is_number, is_string
from core.llm.system_prompts import INDUSTRY_INSIGHTS_PROMPT_TEMPLATE, JSON_ONLY_SYSTEM_PROMPT

logger = logging.getLogger(__name__)

DEMAND_LEVELS = ("High", "Medium", "Low")
MARKET_OUTLOOKS = ("Positive", "Neutral", "Negative")


def is_salary_range(item: Any) -> bool:
    """A salary row names its role; figures and location are optional."""
    if not isinstance(item, dict) or not isinstance(item.get("role"), str):
        return False
    for key in ("min", "max", "median"):
        if item.get(key) is not None and not is_number(item[key]):
            return False
    location = item.get("location")
    return location is None or isinstance(location, str)


INSIGHT_SCHEMA = ResultSchema(
    name="industry_insights",
    fields=(
        FieldSpec("salaryRanges", FieldKind.SEQUENCE, [], item_check=is_salary_range),
        FieldSpec("growthRate", FieldKind.NUMBER, 0),
        FieldSpec("demandLevel", FieldKind.CHOICE, "Medium", choices=DEMAND_LEVELS),
        FieldSpec("topSkills", FieldKind.SEQUENCE, [], item_check=is_string),
        FieldSpec("marketOutlook", FieldKind.CHOICE, "Neutral", choices=MARKET_OUTLOOKS),
        FieldSpec("keyTrends", FieldKind.SEQUENCE, [], item_check=is_string),
        FieldSpec("recommendedSkills", FieldKind.SEQUENCE, [], item_check=is_string),
    ),
)

FALLBACK_INSIGHTS: Dict[str, Any] = INSIGHT_SCHEMA.defaults()

# Reply keys -> IndustryInsight columns
INSIGHT_COLUMNS = {
    "salaryRanges": "salary_ranges",
    "growthRate": "growth_rate",
    "demandLevel": "demand_level",
    "topSkills": "top_skills",
    "marketOutlook": "market_outlook",
    "keyTrends": "key_trends",
    "recommendedSkills": "recommended_skills",
}


def build_insights_request(industry: str) -> GenerationRequest:
    return GenerationRequest(
        template=INDUSTRY_INSIGHTS_PROMPT_TEMPLATE,
        parameters={"industry": industry},
        system_prompt=JSON_ONLY_SYSTEM_PROMPT,
    )


def generate_ai_insights(generator: TolerantGenerator, industry: str) -> GenerationOutcome:
    """Generate insights for one industry; never raises on model failure."""
    logger.info(f"Generating AI insights for industry: {industry}")
    outcome = generator.generate(build_insights_request(industry), INSIGHT_SCHEMA, FALLBACK_INSIGHTS)
    if outcome.is_fallback:
        logger.error(f"Insight generation for '{industry}' fell back to defaults: {outcome.error}")
    return outcome


def to_insight_columns(result: Dict[str, Any]) -> Dict[str, Any]:
    """Rename a generated insight record to IndustryInsight column names."""
    return {column: result[key] for key, column in INSIGHT_COLUMNS.items()}
