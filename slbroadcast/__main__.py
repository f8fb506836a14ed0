"""Allow running as ``python -m slbroadcast``."""
from slbroadcast.cli import app

if __name__ == "__main__":
    app(prog_name="slbroadcast")
