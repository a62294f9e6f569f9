"""Plain-text report rendering."""

from faasreport.report.grid import GridWriter, render_grid
from faasreport.report.render import feature_flags, render_function, render_report

__all__ = ["GridWriter", "feature_flags", "render_function", "render_grid", "render_report"]
