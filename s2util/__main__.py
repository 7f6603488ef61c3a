import sys

from s2util.cli import main

sys.exit(main())
