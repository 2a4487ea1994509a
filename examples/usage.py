"""
Usage Example - List every emoji commit type.

Usage:
  python examples/usage.py
"""

from emoji_commit_type.output import print_commit_types


if __name__ == "__main__":
    print_commit_types()
