# COVID Country Report
"""
COVID Country Report
Exploratory report on JHU CSSE time series for a pair of countries.

Project Structure:
    covid_report/
    ├── data/          - STAGE 1-3: Fetching, reshaping, aggregation
    ├── analysis/      - STAGE 4: Summary statistics and regressions
    └── visualization/ - Plotting utilities
"""

__version__ = "0.1.0"
__author__ = "COVID Report Team"
