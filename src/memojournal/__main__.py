import sys

from memojournal.cli import main

sys.exit(main())
