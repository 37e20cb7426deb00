#!/usr/bin/env python3
"""
FeedSig - Article Word-Frequency Signatures
===========================================

Main application entry point.

Usage:
    python main.py --help                    # Show all commands
    python main.py check-config              # Show effective configuration
    python main.py signature -H "..." -t "..."  # Print an article signature
    python main.py stopwords WORD...         # Check the low-value word list
"""

import sys
from pathlib import Path

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).parent))

from feedsig.cli import cli

if __name__ == '__main__':
    cli()
