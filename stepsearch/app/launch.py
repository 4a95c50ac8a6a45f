# stepsearch/app/launch.py
# Console entry point `stepsearch-ui`: starts the Streamlit page.
from __future__ import annotations
import subprocess
import sys
from pathlib import Path

APP = Path(__file__).with_name("streamlit_app.py")


def main() -> int:
    return subprocess.call([sys.executable, "-m", "streamlit", "run", str(APP), *sys.argv[1:]])


if __name__ == "__main__":
    sys.exit(main())
