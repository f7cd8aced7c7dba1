import sys

from ubp_poller.cli import main

sys.exit(main())
