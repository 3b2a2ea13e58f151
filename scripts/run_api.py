#!/usr/bin/env python
"""
Launch the billing API with uvicorn. Extra arguments go straight to uvicorn
and override the defaults.

Usage:
    python scripts/run_api.py [--port 9000] [--no-reload]
"""
import subprocess
import sys
import os
from pathlib import Path


def main():
    project_root = Path(__file__).parent.parent

    # Make src importable for the uvicorn child process
    env = os.environ.copy()
    src_path = str(project_root / "src")
    env["PYTHONPATH"] = os.pathsep.join(p for p in (src_path, env.get("PYTHONPATH")) if p)

    extra = sys.argv[1:]
    cmd = [sys.executable, "-m", "uvicorn", "plan_billing.api.main:app"]
    if "--host" not in extra:
        cmd += ["--host", "127.0.0.1"]
    if "--port" not in extra:
        cmd += ["--port", "8000"]
    if "--no-reload" in extra:
        extra = [a for a in extra if a != "--no-reload"]
    else:
        cmd.append("--reload")
    cmd += extra

    print(f"Starting billing API: {' '.join(cmd)}")
    try:
        subprocess.run(cmd, cwd=str(project_root), env=env)
    except KeyboardInterrupt:
        print("\nBilling API stopped.")


if __name__ == "__main__":
    main()
