#!/usr/bin/env python
"""
Launch the Streamlit billing UI. Extra arguments go straight to streamlit.

Usage:
    python scripts/run_app.py [--server.port 8501]
"""
import subprocess
import sys
from pathlib import Path


def main():
    project_root = Path(__file__).parent.parent
    ui_path = project_root / 'src' / 'plan_billing' / 'ui' / 'app_streamlit.py'

    if not ui_path.exists():
        print(f"ERROR: billing UI not found at {ui_path}")
        sys.exit(1)

    cmd = [sys.executable, '-m', 'streamlit', 'run', str(ui_path), *sys.argv[1:]]
    print(f"Starting billing UI: {' '.join(cmd)}")

    try:
        subprocess.run(cmd, cwd=str(project_root))
    except KeyboardInterrupt:
        print("\nBilling UI stopped.")


if __name__ == "__main__":
    main()
