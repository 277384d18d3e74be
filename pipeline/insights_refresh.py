"""Scheduled industry insight refresh.

Regenerates the insight row of every known industry, one industry at a
time. Each industry is generated and persisted before the next starts; a
persistence failure on one industry is logged and the loop moves on.
"""

import time
import logging
import threading
from datetime import timedelta
from typing import List, Optional
from dataclasses import dataclass, field

from core.app_context import AppContext
from core.generation.insights import generate_ai_insights, to_insight_columns
from database.repository import CareerRepository
from database.retry import run_with_reconnect


logger = logging.getLogger(__name__)


@dataclass
class InsightsRefreshResult:
    """Result of one refresh run."""
    success: bool
    processed: int
    fallback_count: int
    failed_industries: List[str] = field(default_factory=list)
    error: Optional[str] = None
    execution_time: float = 0.0


def load_industries(ctx: AppContext) -> List[str]:
    return run_with_reconnect(
        ctx.database,
        lambda session: CareerRepository(session).insights.list_industries(),
        ctx.config.persistence,
        description="Fetch industries"
    )


def refresh_industry(ctx: AppContext, industry: str) -> bool:
    """Generate and upsert one industry's insight.

    Returns:
        True if the generated record was the static fallback.
    """
    outcome = generate_ai_insights(ctx.generator, industry)
    columns = to_insight_columns(outcome.result)
    refresh_interval = timedelta(days=ctx.config.insights.refresh_interval_days)

    run_with_reconnect(
        ctx.database,
        lambda session: CareerRepository(session).insights.upsert(industry, columns, refresh_interval),
        ctx.config.persistence,
        description=f"Upsert {industry} insights"
    )
    return outcome.is_fallback


def refresh_industry_insights(
    ctx: AppContext,
    stop_event: Optional[threading.Event] = None
) -> InsightsRefreshResult:
    """Run the refresh over every stored industry.

    Args:
        ctx: Application context with config, database and generator
        stop_event: Optional event to stop between industries

    Returns:
        InsightsRefreshResult with per-run counts
    """
    if stop_event is None:
        stop_event = threading.Event()

    run_start = time.time()

    logger.info("=" * 60)
    logger.info("STARTING INDUSTRY INSIGHTS REFRESH")
    logger.info("=" * 60)

    try:
        industries = load_industries(ctx)
    except Exception as e:
        logger.error(f"Could not load industries: {e}", exc_info=True)
        return InsightsRefreshResult(
            success=False,
            processed=0,
            fallback_count=0,
            error=str(e),
            execution_time=time.time() - run_start
        )

    logger.info(f"Refreshing {len(industries)} industries")

    processed = 0
    fallback_count = 0
    failed: List[str] = []

    for industry in industries:
        if stop_event.is_set():
            logger.info("Stop requested, ending refresh early")
            break

        step_start = time.time()
        try:
            if refresh_industry(ctx, industry):
                fallback_count += 1
            processed += 1
            logger.info(f"Refreshed '{industry}' in {time.time() - step_start:.2f}s")
        except Exception as e:
            failed.append(industry)
            logger.error(f"[Upsert Error for {industry}] giving up: {e}", exc_info=True)

    execution_time = time.time() - run_start

    logger.info("=" * 60)
    logger.info(
        f"INSIGHTS REFRESH COMPLETE: {processed} refreshed, {fallback_count} fallback, "
        f"{len(failed)} failed in {execution_time:.2f}s"
    )
    logger.info("=" * 60)

    return InsightsRefreshResult(
        success=not failed,
        processed=processed,
        fallback_count=fallback_count,
        failed_industries=failed,
        error=f"Failed industries: {', '.join(failed)}" if failed else None,
        execution_time=execution_time
    )
