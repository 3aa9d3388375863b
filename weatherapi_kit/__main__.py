# ABOUTME: Allows running the client as `python -m weatherapi_kit`.
# ABOUTME: Delegates to the argparse entry point in cli.py.

from weatherapi_kit.cli import main

raise SystemExit(main())
