"""Allow ``python -m trend_percentages``."""

from trend_percentages.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
