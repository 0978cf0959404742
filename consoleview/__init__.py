"""View model for an async runtime console: styled text, durations, warnings, tables, controls, histograms and view navigation."""

__version__ = "0.1.0"