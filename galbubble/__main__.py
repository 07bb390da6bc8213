import sys

from galbubble.cli import main

sys.exit(main())
