"""
Development runner.

Puts 'src' on sys.path so the app starts from a checkout without installing
the package.

Usage:
    $ python run.py [--debug] [--history history.jsonl]
"""
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from wordwheel.main import main

if __name__ == "__main__":
    main()
