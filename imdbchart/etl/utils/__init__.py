"""ETL utilities package: logging."""

from imdbchart.etl.utils.logger import set_level, setup_logger

__all__ = ["set_level", "setup_logger"]
