import sys

from lc3dis.cli import main

sys.exit(main())
