"""
Console entry point for Personal Budget Tracker.

Run with:  python -m app.main   (or the installed ``budget-tracker`` script)
"""

from budget_tracker.shell import main


if __name__ == "__main__":
    main()
