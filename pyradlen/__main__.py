import sys

from pyradlen.cli import main

sys.exit(main())
