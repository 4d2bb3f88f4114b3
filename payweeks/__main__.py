import sys

from payweeks.cli import main

sys.exit(main())
