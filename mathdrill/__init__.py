"""mathdrill — interactive arithmetic and Kelly-criterion practice drills."""

__version__ = "0.1.0"
