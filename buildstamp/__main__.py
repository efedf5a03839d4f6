#!/usr/bin/env python3
"""
buildstamp - Build Version Stamping
Allows running the application with ``python -m buildstamp``.
"""

from .cli import main

if __name__ == '__main__':
    main()
