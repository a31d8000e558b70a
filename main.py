#!/usr/bin/env python3
"""
Script entry point for imagescout.

Equivalent to the installed ``imagescout`` command:

    python main.py "mountain lake" 5
"""

from __future__ import annotations

from imagescout.cli import main

if __name__ == "__main__":
    main()
