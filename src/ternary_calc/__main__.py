"""Allow `python -m ternary_calc`."""

from ternary_calc.cli import run

if __name__ == "__main__":
    run()
