#!/usr/bin/env python3
"""
TimeZone Manager - Console Entry Point

Run this script from an elevated prompt:
    python run_tzmanager.py start    # pick a time zone
    python run_tzmanager.py reset    # restore the original one
"""

from tzmanager.cli import run

if __name__ == '__main__':
    run()
