"""
Run with: python -m stacksimulator
"""
import sys

from stacksimulator.main import main

if __name__ == "__main__":
    sys.exit(main())
