"""Dashboard grouping and aggregation."""

from statusboard.dashboard.models import Group
from statusboard.dashboard.pipeline import DashboardPipeline, build_dashboard

__all__ = ["DashboardPipeline", "Group", "build_dashboard"]
