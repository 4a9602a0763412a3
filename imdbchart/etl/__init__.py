"""ETL package: IMDb chart extraction and JSON output."""
