import sys

from cnfparse.cli import main

sys.exit(main())
