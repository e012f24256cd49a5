"""Allow running with ``python -m app_secret_alerts``."""

from .main import main

main()
