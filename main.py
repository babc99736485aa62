#!/usr/bin/env python3
"""
indexgraph - Main Entry Point

Builds directed graphs from edge lists and traverses them
breadth-first or depth-first.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from indexgraph.cli import main

if __name__ == "__main__":
    main()
