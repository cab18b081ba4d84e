#!/usr/bin/env python3
"""
Experiment 00: Sanity Check

Quick verification that the report can run:
1. Config loads
2. Basic imports work
3. Every source URL answers with the expected wide layout

Usage:
    python experiments/00_sanity_check.py
"""
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def check_config():
    """Test config loading."""
    print("Checking config...", end=" ")
    try:
        from covid_report.config import load_config, get_countries
        cfg = load_config()
        assert 'data' in cfg
        assert 'sources' in cfg['data']
        get_countries(cfg)
        print("✓")
        return True
    except Exception as e:
        print(f"✗ ({e})")
        return False


def check_imports():
    """Test key imports."""
    print("Checking imports...", end=" ")
    try:
        import pandas as pd
        import numpy as np
        import yaml
        import requests
        import matplotlib
        from scipy import stats
        print("✓")
        return True
    except ImportError as e:
        print(f"✗ (Missing: {e})")
        return False


def check_sources():
    """Fetch every source and validate its columns."""
    print("Checking sources...", end=" ")
    try:
        from covid_report.config import load_config
        from covid_report.data.fetcher import fetch_csv, validate_wide_schema

        cfg = load_config()
        timeout = cfg['data'].get('fetch', {}).get('timeout', 30)
        for metric, url in cfg['data']['sources'].items():
            df = fetch_csv(url, timeout=timeout)
            validate_wide_schema(
                df, name=metric,
                date_format=cfg.get('processing', {}).get('date_format', '%m/%d/%y'),
            )
            assert len(df) > 0, f"{metric}: no rows"
        print("✓")
        return True
    except Exception as e:
        print(f"✗ ({e})")
        return False


def main():
    print("=" * 60)
    print("COVID COUNTRY REPORT - SANITY CHECK")
    print("=" * 60)
    
    checks = [
        ("Config", check_config),
        ("Imports", check_imports),
        ("Sources", check_sources),
    ]
    
    results = []
    for name, check_fn in checks:
        results.append(check_fn())
    
    print("\n" + "=" * 60)
    passed = sum(results)
    total = len(results)
    
    if passed == total:
        print(f"ALL CHECKS PASSED ({passed}/{total}) ✓")
    else:
        print(f"CHECKS FAILED ({passed}/{total}) ✗")
        sys.exit(1)


if __name__ == "__main__":
    main()
