#!/usr/bin/env python3
"""
Main script to launch Classic Pong with PyGame graphical interface
"""

import importlib.util
import sys
import traceback


def check_dependencies() -> None:
    for module in ("pygame", "pydantic"):
        if importlib.util.find_spec(module) is not None:
            print(f"✓ {module} is installed")
        else:
            print(f"✗ {module} is not installed - pip install {module}")


if __name__ == "__main__":
    try:
        from classic_pong.gui.game_app import main
    except ImportError as e:
        print(f"Import error: {e}")
        print()
        print("Checking dependencies:")
        check_dependencies()
        sys.exit(1)

    try:
        main()
    except Exception as e:
        print(f"Error: {e}")
        traceback.print_exc()
        sys.exit(1)
