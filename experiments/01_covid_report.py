#!/usr/bin/env python3
"""
Experiment 01: COVID Country Report

Fetches the JHU CSSE global time series, builds the country-day table,
and reports on the two configured countries:
- Summary statistics
- Cases/deaths trend charts (log scale) and a combined comparison chart
- Daily new cases/deaths charts
- OLS fits of cumulative deaths on cumulative cases

Output: results/report/*.png, results/report/regression_summary.json

Usage:
    python experiments/01_covid_report.py
    python experiments/01_covid_report.py --config config/config_default.yaml
"""
import sys
import json
import argparse
from pathlib import Path
from datetime import datetime

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from covid_report.config import load_config, get_project_root
from covid_report.pipeline import run_report
from covid_report.analysis.summary import format_summary
from covid_report.analysis.regression import format_regression


def main():
    parser = argparse.ArgumentParser(description="COVID country report")
    parser.add_argument(
        "--config",
        type=str,
        default="config/config_default.yaml",
        help="Path to config file"
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory for figures (default: reporting.output_dir from config)"
    )
    args = parser.parse_args()
    
    root = get_project_root()
    cfg = load_config(str(root / args.config))
    output_dir = root / (args.output_dir or cfg['reporting']['output_dir'])
    
    print("=" * 60)
    print("COVID COUNTRY REPORT")
    print("=" * 60)
    
    result = run_report(cfg, output_dir)
    
    print("\n" + "=" * 60)
    print("SUMMARY STATISTICS")
    print("=" * 60)
    for country in result.countries:
        print()
        print(format_summary(result.summaries[country], country))
    
    print("\n" + "=" * 60)
    print("REGRESSIONS")
    print("=" * 60)
    for country in result.countries:
        print()
        if country in result.regressions:
            print(format_regression(result.regressions[country]))
        else:
            print(f"{country}: no regression (degenerate input)")
    
    summary_path = output_dir / "regression_summary.json"
    summary_path.parent.mkdir(parents=True, exist_ok=True)
    with open(summary_path, 'w') as f:
        json.dump({
            'generated_at': datetime.now().isoformat(),
            'countries': result.countries,
            'regressions': {c: r.to_dict() for c, r in result.regressions.items()},
        }, f, indent=2)
    
    print("\nFigures:")
    for path in result.figures:
        print(f"  ✓ {path.name}")
    print(f"  ✓ {summary_path.name}")
    
    print("\n✓ Report complete!")
    return result


if __name__ == "__main__":
    main()
