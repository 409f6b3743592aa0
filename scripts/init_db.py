"""
Database initialization script.

Creates the leagues, games, league_slate_lines and picks tables on the
configured database.  Production databases should use ``alembic upgrade head``.

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy.exc import SQLAlchemyError

from app.core.logging import configure_logging
from app.db.init_db import init_db

if __name__ == "__main__":
    configure_logging()
    print("=" * 50)
    print("CFB Pick'em Database Initialization")
    print("=" * 50)

    try:
        init_db()
    except SQLAlchemyError as e:
        print(f"ERROR: Database initialization failed: {e}")
        sys.exit(1)

    print("SUCCESS: Database initialized!")
