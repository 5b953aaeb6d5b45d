import sys

from cellstats.cli import main

sys.exit(main())
