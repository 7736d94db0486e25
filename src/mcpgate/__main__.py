import sys

from mcpgate.cli import main

sys.exit(main())  # type: ignore[call-arg]
