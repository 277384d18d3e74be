"""Batch jobs for Sensai."""

from .insights_refresh import refresh_industry_insights, InsightsRefreshResult

__all__ = ['refresh_industry_insights', 'InsightsRefreshResult']
