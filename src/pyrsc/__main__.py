import sys

from pyrsc.cli import main

sys.exit(main())
