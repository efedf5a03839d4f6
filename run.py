#!/usr/bin/env python3
"""
buildstamp - Build Version Stamping
Convenient entry point script in project root.
"""

import sys
import os

# Add project root to Python path for the buildstamp package
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)

# Import and run the CLI
from buildstamp.cli import main

if __name__ == '__main__':
    try:
        main()
    except KeyboardInterrupt:
        print("\n⚠️  Interrupted by user")
        sys.exit(1)
