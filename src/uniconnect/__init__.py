"""UniConnect - student accounts, sessions and study groups.

Google sign-in with rotating refresh sessions, student profiles and
owner-managed study groups, served over FastAPI on PostgreSQL.
"""

from .__version__ import __version__

__all__ = ["__version__"]
