#!/usr/bin/env python3
"""
Detective Quest: Final Judgement
Main launcher - run from project root
"""

import sys
import os

# Add src directory to Python path for top-level package imports
src_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src')
sys.path.insert(0, src_path)

if __name__ == "__main__":
    from game_loop import main
    sys.exit(main())
