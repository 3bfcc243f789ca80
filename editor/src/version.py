"""Application version.

Major.minor comes from the VERSION file at the repository root; the patch
number is the git commit count since the last tag (or since the first commit
when there are no tags). Without git the patch number is 0.
"""

import subprocess
from pathlib import Path

VERSION_FILE = Path(__file__).resolve().parent.parent.parent / "VERSION"


def _git(*args):
    """Run a git command in the repository root; stdout or None on failure."""
    try:
        result = subprocess.run(
            ['git', *args],
            capture_output=True, text=True, check=False,
            cwd=str(VERSION_FILE.parent),
        )
    except FileNotFoundError:
        return None  # git not installed
    if result.returncode != 0:
        return None
    return result.stdout.strip()


def get_version() -> str:
    """Get the application version string (e.g. '1.0.12')."""
    try:
        major_minor = VERSION_FILE.read_text().strip()
    except FileNotFoundError:
        major_minor = "0.0"

    # Format: v1.0-5-gabcdef  ->  parts[-2] = commit count
    described = _git('describe', '--tags', '--long')
    if described:
        parts = described.rsplit('-', 2)
        if len(parts) == 3:
            return f"{major_minor}.{parts[1]}"

    total = _git('rev-list', '--count', 'HEAD')
    if total:
        return f"{major_minor}.{total}"

    return f"{major_minor}.0"
