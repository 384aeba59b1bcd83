"""
dyn-form Server Entry Point.

Usage:
    python run_server.py
    python run_server.py --port 8080 --db data/db.json

    # Use environment variables
    PORT=8080 DYN_FORM_DB_PATH=data/db.json python run_server.py
"""

import sys
from pathlib import Path

# Add src to path for local development
sys.path.insert(0, str(Path(__file__).parent / "src"))

from dyn_form.cli import main


if __name__ == "__main__":
    main()
