import sys

from wormgraph.cli import main

sys.exit(main())
