import sys

from jarvis_hull.cli import main

sys.exit(main())
