"""Allow ``python -m spark_therapy``."""

from .app import run

if __name__ == "__main__":
    run()
