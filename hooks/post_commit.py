#!/usr/bin/env python3
"""Git post-commit hook for fistbump.

Install with ``fistbump install``, or copy/symlink this file to
``.git/hooks/post-commit``. It can also be used with the pre-commit
framework:

    # .pre-commit-config.yaml
    repos:
      - repo: local
        hooks:
          - id: fistbump
            name: fistbump version bump
            entry: python -m fistbump bump
            language: python
            stages: [post-commit]
            always_run: true
"""

from __future__ import annotations

import subprocess
import sys


def main() -> int:
    """Run fistbump against the commit that was just made."""
    cmd = [sys.executable, "-m", "fistbump", "bump"]
    result = subprocess.run(cmd)
    return result.returncode


if __name__ == "__main__":
    sys.exit(main())
