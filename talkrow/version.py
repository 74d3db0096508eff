"""
Version information for talkrow.

Update this file for releases or use environment variables for CI/CD.
"""

import os

# Version info - update for releases
VERSION = os.getenv('TALKROW_VERSION', '0.1.0')
APP_NAME = 'talkrow'


def get_version_string():
    """Get formatted version string."""
    return f"{APP_NAME} {VERSION}"
