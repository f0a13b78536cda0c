"""Allow running the solver with `python -m waystations`."""

from waystations import main

main()
